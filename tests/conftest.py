"""Shared fixtures for hydroplan tests."""

import copy

import pytest

from hydroplan.profile.builder import build_profile

# Marathon reference athlete: 70 kg runner, 3.5 h at 18-22 C
MARATHON_PROFILE: dict = {
    "age": 35,
    "sex": "male",
    "weight_kg": 70,
    "disciplines": ["Running"],
    "session_duration_hours": 3.5,
    "training_temp_range": {"min": 18, "max": 22},
    "humidity_pct": 50,
    "sweat_rate": "medium",
    "sweat_saltiness": "medium",
    "altitude": "sea-level",
    "sun_exposure": "partial",
    "daily_salt_intake": "medium",
}


@pytest.fixture
def profile_data() -> dict:
    """Fresh copy of the marathon reference profile as raw input."""
    return copy.deepcopy(MARATHON_PROFILE)


@pytest.fixture
def make_profile():
    """Factory building a validated profile from the reference plus overrides."""

    def _make(**overrides):
        return build_profile(copy.deepcopy(MARATHON_PROFILE), **overrides)

    return _make
