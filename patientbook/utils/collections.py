"""Argument guards shared by the collection types."""

from typing import Any

from patientbook.models.exceptions import NullArgumentError


def require_non_null(obj: Any, name: str = "argument") -> None:
    """Raise NullArgumentError if obj is None."""
    if obj is None:
        raise NullArgumentError(f"{name} must not be None")


def require_all_non_null(*objects: Any) -> None:
    """Raise NullArgumentError if any of the given objects is None."""
    if any(obj is None for obj in objects):
        raise NullArgumentError("arguments must not be None")
