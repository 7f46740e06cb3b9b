"""Shared fixtures for Wardbook tests."""

from __future__ import annotations

import pytest

from wardbook.models import AdmissionForm
from wardbook.store import PatientStore


def make_form(name: str = "Alice", age: int = 30, gender: str = "F", **overrides) -> AdmissionForm:
    fields = {
        "name": name,
        "age": age,
        "gender": gender,
        "address": "1 High Street",
        "illness": "Flu",
        "doctor": "Dr. Grey",
        "admission_date": "01/02/2024",
    }
    fields.update(overrides)
    return AdmissionForm(**fields)


@pytest.fixture
def store() -> PatientStore:
    return PatientStore()


@pytest.fixture
def populated_store() -> PatientStore:
    store = PatientStore()
    store.admit(make_form("Alice", 30, "F"))
    store.admit(make_form("Bob", 45, "M", address="", illness="Fracture"))
    store.admit(make_form("Carol", 62, "F", doctor="Dr. House"))
    return store
