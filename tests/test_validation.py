"""Tests for operator input validation."""

from __future__ import annotations

import pytest

from wardbook.validation import (
    validate_age,
    validate_gender,
    validate_menu_choice,
    validate_patient_id,
)


@pytest.mark.parametrize("raw, expected", [("0", 0), ("120", 120), (" 42 ", 42)])
def test_valid_ages(raw, expected):
    result = validate_age(raw)
    assert result.ok
    assert result.value == expected


@pytest.mark.parametrize("raw", ["-1", "121", "abc", "", "4.5"])
def test_invalid_ages(raw):
    result = validate_age(raw)
    assert not result.ok
    assert "0-120" in result.error


def test_gender_accepts_only_upper_m_or_f():
    assert validate_gender("M").value == "M"
    assert validate_gender("F\n").value == "F"
    assert not validate_gender("m").ok
    assert not validate_gender("X").ok
    assert not validate_gender("").ok


def test_patient_id():
    assert validate_patient_id("7").value == 7
    assert not validate_patient_id("seven").ok


@pytest.mark.parametrize("raw", ["0", "15", "x", ""])
def test_menu_choice_out_of_range(raw):
    result = validate_menu_choice(raw)
    assert result.error == "Invalid choice, please try again."


def test_menu_choice_bounds():
    assert validate_menu_choice("1").value == 1
    assert validate_menu_choice("14").value == 14
