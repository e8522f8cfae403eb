"""In-memory patient record collections."""

from patientbook.models.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    NullArgumentError,
    PatientBookError,
)
from patientbook.models.patient import Ic, Patient
from patientbook.models.patient_book import PatientBook
from patientbook.models.unique_patient_list import UniquePatientList

__version__ = "0.1.0"

__all__ = [
    "DuplicateEntityError",
    "EntityNotFoundError",
    "Ic",
    "NullArgumentError",
    "Patient",
    "PatientBook",
    "PatientBookError",
    "UniquePatientList",
]
