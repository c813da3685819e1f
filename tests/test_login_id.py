"""Unit tests for login ID derivation."""

import pytest

from garage_api.application.services.login_id import (
    clean_garage_name,
    clean_name,
    derive_login_id,
    sanitize_segment,
)


@pytest.mark.parametrize(
    "first, last, garage, expected",
    [
        ("John", "Doe", "Test Garage", "john.doe@testgarage"),
        ("O'Neil", "Doe", "Test Garage", "o'neil.doe@testgarage"),
        ("John", "Doe", "Garage 123", "john.doe@garage123"),
        ("John", "Doe", "The Best Garage In Town", "john.doe@thebestgarageintown"),
        ("A", "Doe", "Test Garage", "a.doe@testgarage"),
        ("John", "B", "Test Garage", "john.b@testgarage"),
        ("  John  ", "\tDoe\n", "Test Garage", "john.doe@testgarage"),
        ("Mary Ann", "Smith", "Test Garage", "maryann.smith@testgarage"),
        ("José", "Müller", "Test Garage", "josé.müller@testgarage"),
        ("John", "Doe", "Joe's Bikes & Co.", "john.doe@joe'sbikes&co."),
    ],
)
def test_derive_login_id(first, last, garage, expected):
    assert derive_login_id(first, last, garage) == expected


def test_empty_garage_name_leaves_bare_at():
    assert derive_login_id("John", "Doe", "") == "john.doe@"
    assert derive_login_id("John", "Doe", None) == "john.doe@"


def test_markup_passes_through_unsanitized():
    login_id = derive_login_id("<script>alert('x')</script>", "Doe", "Test Garage")
    assert login_id == "<script>alert('x')</script>.doe@testgarage"


def test_zero_width_and_direction_characters_are_kept():
    assert derive_login_id("Jo\u200bhn", "Doe", "G") == "jo\u200bhn.doe@g"
    assert derive_login_id("\u202eJohn", "Doe", "G") == "\u202ejohn.doe@g"


def test_clean_name_collapses_internal_whitespace():
    assert clean_name("John   \t Doe") == "johndoe"


def test_clean_garage_name_keeps_punctuation_and_digits():
    assert clean_garage_name(" Moto-Works #7 ") == "moto-works#7"


def test_sanitize_strips_diacritics_and_symbols():
    assert sanitize_segment("Müller!") == "muller"
    assert sanitize_segment("o'neil-smith<>") == "o'neil-smith"


def test_sanitized_login_id():
    assert derive_login_id("José", "Müller", "Café Motos", sanitize=True) == "jose.muller@cafemotos"
    assert derive_login_id("<b>John</b>", "Doe", "Test Garage", sanitize=True) == "bjohnb.doe@testgarage"
