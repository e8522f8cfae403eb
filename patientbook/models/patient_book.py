"""Aggregate model that owns the patient list."""

from collections.abc import Iterable

from patientbook.models.observable import UnmodifiableObservableList
from patientbook.models.patient import Ic, Patient
from patientbook.models.unique_patient_list import UniquePatientList
from patientbook.utils.collections import require_non_null
from patientbook.utils.logging import get_logger

logger = get_logger(__name__)


class PatientBook:
    """Wraps all patient data at the book level.

    Duplicates are not allowed (by ``Patient.is_same_person``).
    """

    def __init__(self, to_be_copied: "PatientBook | None" = None):
        self.patients = UniquePatientList()
        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    def set_patients(self, patients: Iterable[Patient]) -> None:
        """Replace the patient list. patients must not contain duplicates."""
        require_non_null(patients, "patients")
        self.patients.set_objects(list(patients))

    def reset_data(self, new_data: "PatientBook") -> None:
        """Replace the contents of this book with new_data."""
        require_non_null(new_data, "new_data")
        self.patients.set_persons(new_data.patients)
        logger.info(f"Patient book reset with {len(self.patients)} patients")

    def has_patient(self, patient: Patient) -> bool:
        """Return True if a patient with the same identity exists in the book."""
        return self.patients.contains(patient)

    def has_patient_ic(self, ic: Ic | str) -> bool:
        """Return True if a patient with the given IC exists in the book."""
        return self.patients.contains_ic(ic)

    def find_by_ic(self, ic: Ic | str) -> Patient | None:
        """Return the patient with the given IC, or None."""
        return self.patients.find_by_ic(ic)

    def add_patient(self, patient: Patient) -> None:
        """Add a patient. The patient must not already exist in the book."""
        self.patients.add(patient)
        logger.info(f"Added patient {patient.ic}")

    def set_patient(self, target: Patient, edited_patient: Patient) -> None:
        """Replace target with edited_patient.

        target must exist in the book, and edited_patient must not share an
        identity with another patient in the book.
        """
        self.patients.set_object(target, edited_patient)
        logger.info(f"Updated patient {target.ic}")

    def remove_patient(self, patient: Patient) -> None:
        """Remove patient from the book. The patient must exist in the book."""
        self.patients.remove(patient)
        logger.info(f"Removed patient {patient.ic}")

    def get_patient_list(self) -> UnmodifiableObservableList[Patient]:
        """Return the live read-only patient list."""
        return self.patients.as_unmodifiable_view()

    def __len__(self) -> int:
        return len(self.patients)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        return isinstance(other, PatientBook) and self.patients == other.patients

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PatientBook({len(self.patients)} patients)"
