"""Tests for the profile validation and sanitization gate."""

import pytest

from hydroplan.profile.types import Altitude, AthleteProfile, SunExposure
from hydroplan.profile.validator import (
    sanitize_profile_input,
    sanitize_string,
    validate_and_sanitize_profile,
)


@pytest.fixture
def submission() -> dict:
    """Complete questionnaire submission, camelCase as sent by the form."""
    return {
        "age": 29,
        "sex": "female",
        "weightKg": 58,
        "heightCm": 168,
        "disciplines": ["Running", "Cycling"],
        "sessionDurationHours": 1.5,
        "indoorOutdoor": "outdoor",
        "trainingTempRange": {"min": 12, "max": 19},
        "humidityPct": 65,
        "altitude": "moderate",
        "sunExposure": "full-sun",
        "windConditions": "calm",
        "clothingType": "minimal",
        "sweatRate": "high",
        "sweatSaltiness": "medium",
        "dailySaltIntake": "low",
        "crampTiming": "late",
        "elevationGain": 350,
        "upcomingEvent": "City 10K",
    }


def test_valid_submission(submission):
    result = validate_and_sanitize_profile(submission)

    assert result.is_valid
    assert result.errors == []
    profile = result.profile
    assert isinstance(profile, AthleteProfile)
    assert profile.weight_kg == 58
    assert profile.altitude == Altitude.MODERATE
    assert profile.sun_exposure == SunExposure.FULL_SUN
    assert profile.elevation_gain_m == 350
    assert profile.training_temp_range.mean_c == 15.5
    assert profile.primary_discipline == "Running"


def test_snake_case_keys_are_accepted(profile_data):
    profile_data.update(
        indoor_outdoor="indoor",
        wind_conditions="moderate",
        clothing_type="light",
    )
    result = validate_and_sanitize_profile(profile_data)
    assert result.is_valid, result.errors


def test_free_text_is_sanitized(submission):
    submission["upcomingEvent"] = "  <script>alert(1)</script> Spring Marathon  "
    submission["concerns"] = "x" * 400

    profile = validate_and_sanitize_profile(submission).profile

    assert profile.upcoming_event == "scriptalert(1)/script Spring Marathon"
    assert profile.concerns == "x" * 400


def test_sanitize_string():
    assert sanitize_string("  <b>hello</b> ") == "bhello/b"
    assert sanitize_string("") == ""
    assert sanitize_string(None) is None
    assert sanitize_string("abcdef", max_length=3) == "abc"
    assert len(sanitize_string("y" * 5000)) == 1000


def test_sanitize_profile_input_leaves_input_untouched():
    raw = {"raceDistance": " <Marathon> ", "age": 30}
    sanitized = sanitize_profile_input(raw)

    assert sanitized == {"raceDistance": "Marathon", "age": 30}
    assert raw["raceDistance"] == " <Marathon> "


@pytest.mark.parametrize(
    ("field", "value", "location"),
    [
        ("age", 12, "age"),
        ("age", 121, "age"),
        ("weightKg", 29.9, "weightKg"),
        ("weightKg", 301, "weightKg"),
        ("humidityPct", 101, "humidityPct"),
        ("heightCm", 99, "heightCm"),
        ("sessionDurationHours", 0.2, "sessionDurationHours"),
        ("sessionDurationHours", 169, "sessionDurationHours"),
        ("elevationGain", -1, "elevationGain"),
        ("altitude", "everest", "altitude"),
        ("sunExposure", "sunny", "sunExposure"),
        ("disciplines", [], "disciplines"),
    ],
)
def test_out_of_range_values_are_rejected(submission, field, value, location):
    submission[field] = value

    result = validate_and_sanitize_profile(submission)

    assert not result.is_valid
    assert result.profile is None
    assert any(error.startswith(f"{location}:") for error in result.errors), result.errors


def test_temperature_bounds_are_enforced(submission):
    submission["trainingTempRange"] = {"min": -25, "max": 55}

    errors = validate_and_sanitize_profile(submission).errors

    assert any(error.startswith("trainingTempRange.min:") for error in errors)
    assert any(error.startswith("trainingTempRange.max:") for error in errors)


def test_inverted_temperature_range_is_rejected(submission):
    submission["trainingTempRange"] = {"min": 30, "max": 20}

    errors = validate_and_sanitize_profile(submission).errors

    assert len(errors) == 1
    assert errors[0].startswith("trainingTempRange:")
    assert "min must not exceed max" in errors[0]


def test_nan_weight_is_rejected(submission):
    submission["weightKg"] = float("nan")
    assert not validate_and_sanitize_profile(submission).is_valid


def test_errors_are_aggregated(submission):
    submission["age"] = 5
    submission["weightKg"] = 500
    del submission["humidityPct"]

    errors = validate_and_sanitize_profile(submission).errors

    assert len(errors) == 3
    assert any(error.startswith("age:") for error in errors)
    assert any(error.startswith("weightKg:") for error in errors)
    assert "humidityPct: Field required" in errors


def test_overlong_free_text_is_capped_then_checked(submission):
    submission["concerns"] = "z" * 600

    errors = validate_and_sanitize_profile(submission).errors

    assert len(errors) == 1
    assert errors[0].startswith("concerns:")


@pytest.mark.parametrize("raw", [None, "age=30", ["age", 30], 42])
def test_non_mapping_input_is_rejected_without_raising(raw):
    result = validate_and_sanitize_profile(raw)

    assert not result.is_valid
    assert result.errors == ["profile: Input should be a mapping of profile fields"]
