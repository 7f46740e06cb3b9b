"""Tests for the in-memory patient store."""

from __future__ import annotations

from wardbook.models import Patient
from wardbook.store import PatientStore

from tests.conftest import make_form


def test_admit_assigns_sequential_ids(store):
    assert store.admit(make_form("Alice")) == 1
    assert store.admit(make_form("Bob", 45, "M")) == 2
    assert store.next_id == 3
    assert len(store) == 2


def test_admitted_patient_starts_undischarged(store):
    patient_id = store.admit(make_form())
    assert store.find_by_id(patient_id).is_discharged is False


def test_ids_are_not_reused_after_delete(store):
    store.admit(make_form("Alice"))
    second = store.admit(make_form("Bob", 45, "M"))
    assert store.delete(second)
    assert store.admit(make_form("Carol")) == 3


def test_ids_continue_after_loaded_records():
    loaded = [
        Patient(id=4, name="Dan", age=50, gender="M"),
        Patient(id=9, name="Eve", age=28, gender="F"),
    ]
    store = PatientStore(loaded)
    assert store.admit(make_form()) == 10


def test_replace_all_never_moves_allocator_backwards(store):
    for _ in range(5):
        store.admit(make_form())
    store.replace_all([Patient(id=2, name="Low", age=1, gender="F")])
    assert store.admit(make_form()) == 6


def test_discharge_flips_flag_once(populated_store):
    assert populated_store.discharge(1) is True
    assert populated_store.find_by_id(1).is_discharged is True
    assert populated_store.discharge(1) is False
    assert populated_store.find_by_id(1).is_discharged is True


def test_discharge_unknown_id(populated_store):
    assert populated_store.discharge(99) is False


def test_find_by_id_missing_returns_none(populated_store):
    assert populated_store.find_by_id(42) is None


def test_find_by_name_is_exact_and_case_sensitive(store):
    store.admit(make_form("Alice"))
    store.admit(make_form("alice"))
    store.admit(make_form("Alice", 70))
    matches = store.find_by_name("Alice")
    assert [p.id for p in matches] == [1, 3]
    assert store.find_by_name("Ali") == []


def test_update_with_no_values_changes_nothing(populated_store):
    before = populated_store.find_by_id(2).model_dump()
    assert populated_store.update(2, "", "", "") is True
    assert populated_store.update(2) is True
    assert populated_store.find_by_id(2).model_dump() == before


def test_update_single_field(populated_store):
    before = populated_store.find_by_id(1).model_dump()
    populated_store.update(1, illness="Pneumonia")
    after = populated_store.find_by_id(1).model_dump()
    assert after.pop("illness") == "Pneumonia"
    before.pop("illness")
    assert after == before


def test_update_missing_patient(populated_store):
    assert populated_store.update(77, address="Nowhere") is False


def test_delete_removes_only_first_match(populated_store):
    others_before = [p.model_dump() for p in populated_store.list_all() if p.id != 2]
    assert populated_store.delete(2) is True
    assert [p.model_dump() for p in populated_store.list_all()] == others_before
    assert populated_store.delete(2) is False


def test_sort_by_name_then_id_restores_id_order(store):
    for name in ("Zed", "Amy", "Mia", "Amy"):
        store.admit(make_form(name))
    store.sort_by_name()
    assert [(p.name, p.id) for p in store.list_all()] == [
        ("Amy", 2), ("Amy", 4), ("Mia", 3), ("Zed", 1),
    ]
    store.sort_by_id()
    assert [p.id for p in store.list_all()] == [1, 2, 3, 4]


def test_sort_by_id_is_stable_for_duplicate_ids():
    store = PatientStore([
        Patient(id=2, name="First", age=1, gender="M"),
        Patient(id=1, name="Other", age=1, gender="M"),
        Patient(id=2, name="Second", age=1, gender="M"),
    ])
    store.sort_by_id()
    assert [p.name for p in store.list_all()] == ["Other", "First", "Second"]


def test_list_views_follow_collection_order(store):
    store.admit(make_form("Alice", 30, "F"))
    store.admit(make_form("Bob", 45, "M"))

    assert store.discharge(1)
    assert [p.name for p in store.list_admitted()] == ["Bob"]
    assert [p.name for p in store.list_discharged()] == ["Alice"]

    assert store.delete(2)
    assert [p.name for p in store.list_all()] == ["Alice"]


def test_list_all_returns_copy(populated_store):
    view = populated_store.list_all()
    view.clear()
    assert len(populated_store) == 3
