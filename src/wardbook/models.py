"""Patient record data models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Gender = Literal["M", "F"]

MIN_AGE = 0
MAX_AGE = 120


class AdmissionForm(BaseModel):
    """Fields supplied by the operator when admitting a patient."""

    name: str = Field(..., description="Patient full name")
    age: int = Field(..., ge=MIN_AGE, le=MAX_AGE, description="Age in years (0-120)")
    gender: Gender = Field(..., description="'M' or 'F'")
    address: str = Field(default="", description="Home address, may be empty")
    illness: str = Field(default="", description="Presenting illness")
    doctor: str = Field(default="", description="Attending doctor")
    admission_date: str = Field(
        default="", description="Admission date as entered (e.g. DD/MM/YYYY)"
    )


class Patient(AdmissionForm):
    """A patient record held by the store."""

    id: int = Field(..., ge=1, description="Sequential patient identifier")
    is_discharged: bool = Field(default=False)

    @classmethod
    def admit(cls, patient_id: int, form: AdmissionForm) -> Patient:
        """Build a freshly admitted record from an admission form."""
        return cls(id=patient_id, is_discharged=False, **form.model_dump())


class PatientUpdate(BaseModel):
    """Optional replacement values for an existing record.

    ``None`` or an empty string leaves the prior value in place.
    """

    address: str | None = None
    illness: str | None = None
    doctor: str | None = None

    def changes(self) -> dict[str, str]:
        """Return only the fields that should overwrite the record."""
        return {
            key: value
            for key, value in self.model_dump().items()
            if value
        }
