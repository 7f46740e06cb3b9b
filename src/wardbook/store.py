"""In-memory patient record store.

Holds the ordered patient collection for the lifetime of the process and
allocates patient IDs. The store does no I/O; loading and saving live in
:mod:`wardbook.codec`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .models import AdmissionForm, Patient, PatientUpdate

logger = logging.getLogger(__name__)


class PatientStore:
    """Ordered patient collection with a monotonically increasing ID allocator.

    Records keep insertion order unless explicitly re-sorted with
    :meth:`sort_by_name` or :meth:`sort_by_id`. IDs are never reused, even
    after a record is deleted.
    """

    def __init__(self, patients: Iterable[Patient] | None = None):
        self._patients: list[Patient] = []
        self._next_id = 1
        if patients is not None:
            self.replace_all(patients)

    def __len__(self) -> int:
        return len(self._patients)

    @property
    def next_id(self) -> int:
        """The ID the next admission will receive."""
        return self._next_id

    # ------------------------------------------------------------------
    # Create / delete
    # ------------------------------------------------------------------

    def admit(self, form: AdmissionForm) -> int:
        """Admit a new patient and return the assigned ID."""
        patient_id = self._next_id
        self._next_id += 1
        self._patients.append(Patient.admit(patient_id, form))
        logger.debug("Admitted patient %d (%s)", patient_id, form.name)
        return patient_id

    def delete(self, patient_id: int) -> bool:
        """Remove the first record with *patient_id*. Returns True if found."""
        for index, patient in enumerate(self._patients):
            if patient.id == patient_id:
                del self._patients[index]
                logger.debug("Deleted patient %d", patient_id)
                return True
        return False

    def replace_all(self, patients: Iterable[Patient]) -> None:
        """Install *patients* as the store contents (used after a load).

        The allocator moves to ``max(id) + 1`` but never backwards.
        """
        self._patients = list(patients)
        for patient in self._patients:
            if self._next_id <= patient.id:
                self._next_id = patient.id + 1

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def discharge(self, patient_id: int) -> bool:
        """Discharge a currently admitted patient.

        Returns False if no admitted record has *patient_id*, including when
        the patient was already discharged.
        """
        for patient in self._patients:
            if patient.id == patient_id and not patient.is_discharged:
                patient.is_discharged = True
                logger.debug("Discharged patient %d", patient_id)
                return True
        return False

    def update(
        self,
        patient_id: int,
        address: str | None = None,
        illness: str | None = None,
        doctor: str | None = None,
    ) -> bool:
        """Overwrite the non-empty fields of the first matching record."""
        patient = self.find_by_id(patient_id)
        if patient is None:
            return False
        changes = PatientUpdate(address=address, illness=illness, doctor=doctor).changes()
        for field_name, value in changes.items():
            setattr(patient, field_name, value)
        if changes:
            logger.debug("Updated patient %d: %s", patient_id, sorted(changes))
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_id(self, patient_id: int) -> Patient | None:
        """Return the first record with *patient_id*, or None."""
        for patient in self._patients:
            if patient.id == patient_id:
                return patient
        return None

    def find_by_name(self, name: str) -> list[Patient]:
        """Return every record whose name matches exactly (case-sensitive)."""
        return [p for p in self._patients if p.name == name]

    def list_all(self) -> list[Patient]:
        return list(self._patients)

    def list_admitted(self) -> list[Patient]:
        return [p for p in self._patients if not p.is_discharged]

    def list_discharged(self) -> list[Patient]:
        return [p for p in self._patients if p.is_discharged]

    # ------------------------------------------------------------------
    # Ordering (list.sort is stable, so ties keep their relative order)
    # ------------------------------------------------------------------

    def sort_by_name(self) -> None:
        self._patients.sort(key=lambda p: p.name)

    def sort_by_id(self) -> None:
        self._patients.sort(key=lambda p: p.id)
