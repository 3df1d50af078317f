"""Tests for pace <-> duration conversion."""

import math

import pytest

from hydroplan.pace.converter import duration_from_pace, pace_from_duration


def test_running_duration_from_pace():
    assert duration_from_pace("Running", "5:00", "10 km") == pytest.approx(10 * 5 / 60)


def test_marathon_duration_from_pace():
    assert duration_from_pace("Running", "5:00", "Marathon") == pytest.approx(42.195 * 5 / 60)


def test_hiking_uses_running_grammar():
    assert duration_from_pace("Hiking", "12:00", "15 km") == pytest.approx(3.0)


def test_swimming_duration_from_pace():
    # 1.5 km = 15 x 100 m at 2:00
    assert duration_from_pace("Swimming", "2:00/100m", 1.5) == pytest.approx(0.5)


def test_cycling_duration_from_speed():
    assert duration_from_pace("Cycling", "30 km/h", 90) == pytest.approx(3.0)


def test_unresolvable_pace_returns_none():
    assert duration_from_pace("Running", "fast", "5 km") is None


def test_discipline_without_pace_returns_none():
    assert duration_from_pace("Gym", "5:00", "5 km") is None


def test_missing_distance_returns_none():
    assert duration_from_pace("Running", "5:00", None) is None


def test_pace_from_duration_running():
    assert pace_from_duration("Running", 42.195 * 5 / 60, "Marathon") == "5:00"


def test_pace_from_duration_rounds_to_nearest_second():
    # 10 km in 50:07 -> 5:00.7 per km -> 5:01
    assert pace_from_duration("Running", (50 * 60 + 7) / 3600, 10) == "5:01"


def test_pace_from_duration_swimming():
    assert pace_from_duration("Swimming", 0.5, 1.5) == "2:00/100m"


def test_pace_from_duration_cycling():
    assert pace_from_duration("Cycling", 3, 100) == "33.3 km/h"


@pytest.mark.parametrize("hours", [0, -1, None, math.inf, math.nan])
def test_pace_from_duration_rejects_bad_duration(hours):
    assert pace_from_duration("Running", hours, 10) is None


def test_pace_from_duration_unknown_discipline():
    assert pace_from_duration("CrossFit", 1.0, 10) is None


@pytest.mark.parametrize(
    ("discipline", "hours", "distance"),
    [
        ("Running", 1e306, 5),
        ("Swimming", 1e306, 5),
        ("Cycling", 1e-306, 1e5),
        ("Cycling", 1.0, "1" * 400),
        ("Running", 1.0, "1" * 400),
    ],
)
def test_pace_from_duration_overflow_returns_none(discipline, hours, distance):
    assert pace_from_duration(discipline, hours, distance) is None


def test_duration_from_pace_overflowing_distance_returns_none():
    assert duration_from_pace("Running", "5:00", "1" * 400) is None


@pytest.mark.parametrize(
    ("discipline", "hours", "distance"),
    [
        # 0.36 s over 5 km would format as 0:00
        ("Running", 0.0001, 5),
        ("Swimming", 0.0001, 5),
        # 4 mm in 0.36 s would format as 0.0 km/h
        ("Cycling", 0.0001, 0.000004),
    ],
)
def test_pace_rounding_to_zero_returns_none(discipline, hours, distance):
    assert pace_from_duration(discipline, hours, distance) is None


@pytest.mark.parametrize(
    ("discipline", "distance_km", "hours"),
    [
        ("Running", 10, 0.87),
        ("Running", 21.0975, 1.93),
        ("Running", 42.195, 4.123),
        ("Swimming", 1.9, 0.71),
        ("Swimming", 3.8, 1.333),
        ("Cycling", 90, 2.77),
        ("Cycling", 180, 5.91),
    ],
)
def test_round_trip_is_stable_within_one_rounding_unit(discipline, distance_km, hours):
    pace = pace_from_duration(discipline, hours, distance_km)
    derived_hours = duration_from_pace(discipline, pace, distance_km)

    assert derived_hours is not None
    assert pace_from_duration(discipline, derived_hours, distance_km) == pace

    if discipline == "Running":
        assert abs(derived_hours - hours) <= distance_km / 3600
    elif discipline == "Swimming":
        assert abs(derived_hours - hours) <= distance_km * 10 / 3600
