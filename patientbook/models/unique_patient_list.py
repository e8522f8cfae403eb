"""Unique list specialised for patients."""

from patientbook.models.patient import Ic, Patient
from patientbook.models.unique_list import UniqueObjectList
from patientbook.utils.collections import require_non_null
from patientbook.utils.logging import get_logger

logger = get_logger(__name__)


class UniquePatientList(UniqueObjectList[Patient]):
    """A list of patients that enforces uniqueness by IC and does not allow nulls.

    Adding and updating use ``Patient.is_same_person``; removal uses
    ``Patient.__eq__`` so that only the patient with exactly the same fields is
    removed.
    """

    def set_persons(self, replacement: "UniquePatientList") -> None:
        """Replace the contents of this list with those of another patient list."""
        require_non_null(replacement, "replacement")
        self._internal_list.set_all(replacement._internal_list)
        logger.debug(f"Replaced contents with {len(replacement)} patients from another list")

    def contains_ic(self, ic: Ic | str) -> bool:
        """Return True if some patient in the list has the given IC."""
        require_non_null(ic, "ic")
        if isinstance(ic, str):
            if not Ic.is_valid(ic):
                return False
            ic = Ic(ic)
        return any(patient.get_ic() == ic for patient in self._internal_list)

    def find_by_ic(self, ic: Ic | str) -> Patient | None:
        """Return the patient with the given IC, or None."""
        require_non_null(ic, "ic")
        if isinstance(ic, str):
            if not Ic.is_valid(ic):
                return None
            ic = Ic(ic)
        return next((patient for patient in self._internal_list if patient.get_ic() == ic), None)
