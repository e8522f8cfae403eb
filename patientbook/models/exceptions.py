"""Patient collection exceptions."""


class PatientBookError(Exception):
    """Base exception for patient collection errors."""


class NullArgumentError(PatientBookError, ValueError):
    """Raised when a required argument is None."""


class DuplicateEntityError(PatientBookError):
    """Raised when an operation would add a second patient with the same identity."""

    def __init__(self, message: str = "Operation would result in duplicate patients"):
        super().__init__(message)


class EntityNotFoundError(PatientBookError, LookupError):
    """Raised when the referenced patient is not in the list."""

    def __init__(self, message: str = "Patient not found in list"):
        super().__init__(message)
