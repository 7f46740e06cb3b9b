"""Validation of raw operator input.

Each validator returns a :class:`ValidationResult` instead of raising, so
callers decide how to retry. The CLI re-prompts until a value is accepted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .models import MAX_AGE, MIN_AGE

MENU_MIN = 1
MENU_MAX = 14


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one piece of input."""

    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def validate_age(raw: str) -> ValidationResult:
    """Accept an integer age between 0 and 120 inclusive."""
    age = _parse_int(raw)
    if age is None or not MIN_AGE <= age <= MAX_AGE:
        return ValidationResult(
            error=f"Invalid age. Please enter a valid age ({MIN_AGE}-{MAX_AGE}): "
        )
    return ValidationResult(value=age)


def validate_gender(raw: str) -> ValidationResult:
    """Accept exactly ``M`` or ``F``."""
    gender = raw.strip()
    if gender not in ("M", "F"):
        return ValidationResult(error="Invalid gender. Please enter M or F: ")
    return ValidationResult(value=gender)


def validate_patient_id(raw: str) -> ValidationResult:
    patient_id = _parse_int(raw)
    if patient_id is None:
        return ValidationResult(error="Invalid ID. Please enter a numeric patient ID: ")
    return ValidationResult(value=patient_id)


def validate_menu_choice(raw: str) -> ValidationResult:
    choice = _parse_int(raw)
    if choice is None or not MENU_MIN <= choice <= MENU_MAX:
        return ValidationResult(error="Invalid choice, please try again.")
    return ValidationResult(value=choice)
