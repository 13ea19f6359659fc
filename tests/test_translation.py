"""
tests.test_translation

Unit tests for the category table, field renaming, and profile building.
"""

from __future__ import annotations

import pytest

from visa_gateway.errors import ValidationError
from visa_gateway.translation import (
    FIELD_RENAMES,
    VisaCategory,
    build_profile,
    coerce_scalar,
    rename_known_fields,
    resolve_category,
)
from visa_gateway.translation.fields import CATEGORY_FIELDS


@pytest.mark.parametrize(
    ("label", "code"),
    [
        ("F1 Student", "f1"),
        ("H1B Work", "h1"),
        ("B1/B2 Visitor", "b1b2"),
        ("K1 Fiance", "k1"),
    ],
)
def test_resolve_category(label: str, code: str) -> None:
    assert resolve_category(label).value == code


@pytest.mark.parametrize("label", ["f1", "F1", "Tourist", "", None, 1, ["F1 Student"]])
def test_resolve_category_rejects_unknown_labels(label) -> None:
    with pytest.raises(ValidationError) as exc_info:
        resolve_category(label)
    assert str(exc_info.value) == "Invalid visa type"


def test_every_category_has_a_rename_table() -> None:
    assert set(CATEGORY_FIELDS) == set(VisaCategory)


def test_rename_table_is_flat_and_collision_free() -> None:
    per_category = sum(len(table) for table in CATEGORY_FIELDS.values())
    assert len(FIELD_RENAMES) == per_category
    assert len(set(FIELD_RENAMES.values())) == per_category


def test_rename_copies_known_fields_and_drops_unknown() -> None:
    extra = rename_known_fields(
        {"universityAcceptance": True, "schoolName": "X", "randomField": 1, "age": 22}
    )
    assert extra == {"university_acceptance": True, "school_name": "X"}


def test_rename_keeps_nested_values_as_is() -> None:
    scores = {"toefl": 105, "gre": [160, 165]}
    assert rename_known_fields({"testScores": scores}) == {"test_scores": scores}


def test_rename_is_order_independent() -> None:
    items = [("jobOffer", True), ("employerName", "Acme"), ("yearsExperience", 4)]
    assert rename_known_fields(dict(items)) == rename_known_fields(dict(reversed(items)))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ""),
        (0, ""),
        (0.0, ""),
        ("", ""),
        (False, ""),
        ([], ""),
        (25, "25"),
        (25.0, "25"),
        (25.5, "25.5"),
        ("India", "India"),
        (True, "true"),
    ],
)
def test_coerce_scalar(value, expected: str) -> None:
    assert coerce_scalar(value) == expected


def test_build_profile_shape() -> None:
    profile = build_profile(
        {
            "visaType": "F1 Student",
            "age": 22,
            "nationality": "India",
            "education": "Bachelors",
            "employment": "Student",
            "income": "0",
            "universityAcceptance": True,
            "schoolName": "X",
            "randomField": 1,
        }
    )
    assert profile.model_dump(mode="json") == {
        "age": "22",
        "nationality": "India",
        "education": "Bachelors",
        "employment": "Student",
        "income": "0",
        "visa_type": "F1 Student",
        "extra": {"f1": {"university_acceptance": True, "school_name": "X"}},
    }


def test_build_profile_defaults_missing_scalars_to_empty_string() -> None:
    profile = build_profile({"visaType": "K1 Fiance", "age": 0})
    assert (profile.age, profile.nationality, profile.income) == ("", "", "")
    assert profile.extra == {"k1": {}}


def test_build_profile_keeps_raw_label_and_keys_extra_by_code() -> None:
    profile = build_profile({"visaType": "B1/B2 Visitor", "returnTicket": True})
    assert profile.visa_type == "B1/B2 Visitor"
    assert profile.extra == {"b1b2": {"return_ticket": True}}


def test_build_profile_groups_other_category_fields_under_resolved_code() -> None:
    profile = build_profile({"visaType": "H1B Work", "schoolName": "X", "jobOffer": True})
    assert profile.extra == {"h1": {"school_name": "X", "job_offer": True}}


def test_build_profile_rejects_missing_visa_type() -> None:
    with pytest.raises(ValidationError):
        build_profile({"age": 30})
