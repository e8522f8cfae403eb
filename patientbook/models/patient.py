"""Patient data models."""

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass(frozen=True)
class Ic:
    """Identity card number (NRIC/FIN) of a patient."""

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[STFGM]\d{7}[A-Z]$")

    def __post_init__(self) -> None:
        """Normalize and validate the identity card number."""
        if not isinstance(self.value, str):
            raise ValueError("IC must be a string")

        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(f"Invalid IC: {self.value!r}")

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check whether a string is a well-formed IC."""
        return isinstance(value, str) and bool(cls.PATTERN.match(value.strip().upper()))


@dataclass(frozen=True)
class Patient:
    """Patient business model.

    Two patients are the same person when they share an IC, even if other
    fields differ. Dataclass equality compares every field.
    """

    ic: Ic
    name: str
    phone: str = ""
    email: str = ""
    address: str = ""
    tags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if isinstance(self.ic, str):
            object.__setattr__(self, "ic", Ic(self.ic))
        elif not isinstance(self.ic, Ic):
            raise ValueError(f"Patient IC must be an Ic or str, got {type(self.ic).__name__}")
        if not self.name or not self.name.strip():
            raise ValueError("Patient name cannot be empty")
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))

    def get_ic(self) -> Ic:
        """Return the patient's IC."""
        return self.ic

    def is_same_person(self, other: Any) -> bool:
        """Return True if other refers to the same real-world patient."""
        if other is self:
            return True
        return isinstance(other, Patient) and other.ic == self.ic

    def is_same(self, other: Any) -> bool:
        """Identity hook used by UniqueObjectList."""
        return self.is_same_person(other)
