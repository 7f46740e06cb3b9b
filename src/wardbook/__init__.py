"""Wardbook - in-memory patient record manager with flat-file persistence."""

from .codec import load_records, save_records, write_report
from .errors import PersistenceError, WardbookError
from .models import AdmissionForm, Patient, PatientUpdate
from .store import PatientStore

__all__ = [
    # Store
    "PatientStore",
    # Models
    "AdmissionForm",
    "Patient",
    "PatientUpdate",
    # Persistence
    "load_records",
    "save_records",
    "write_report",
    # Errors
    "WardbookError",
    "PersistenceError",
]
