import pytest

from hydroplan.config.settings import settings
from hydroplan.pace.distances import RACE_DISTANCE_ALIASES, match_race_alias, resolve_distance_km


def test_aliases_never_follow_an_alias_they_contain():
    aliases = [alias for alias, _km in RACE_DISTANCE_ALIASES]
    for index, alias in enumerate(aliases):
        assert not any(alias in later for later in aliases[index + 1 :]), alias


@pytest.mark.parametrize(
    ("text", "expected_km"),
    [
        ("Half Marathon", 21.0975),
        ("half-marathon", 21.0975),
        ("Marathon", 42.195),
        ("Berlin Marathon 2025", 42.195),
        ("HALF   MARATHON", 21.0975),
        ("Half Ironman", 21.0975),
        ("Ironman 70.3", 21.0975),
        ("70.3 Ironman", 21.0975),
        ("Ironman Oceanside 70.3", 21.0975),
        ("140.6 Ironman", 42.195),
        ("Ironman", 42.195),
        ("Full Ironman", 42.195),
        ("Sprint Triathlon", 5.0),
        ("Olympic Triathlon", 10.0),
        ("5 km", 5.0),
        ("15 km", 15.0),
        ("15km", 15.0),
        ("100 km", 100.0),
    ],
)
def test_resolve_canonical_race_names(text, expected_km):
    assert resolve_distance_km(text) == expected_km


def test_half_marathon_is_not_captured_by_marathon():
    assert match_race_alias("my first half marathon") == 21.0975


def test_unrecognized_text_uses_first_number():
    assert resolve_distance_km("25 km trail") == 25.0
    assert resolve_distance_km("1.5") == 1.5


def test_text_without_number_falls_back_to_default():
    assert resolve_distance_km("local parkrun") == 5.0


def test_default_distance_follows_settings(monkeypatch):
    monkeypatch.setattr(settings, "default_race_distance_km", 8.0)
    assert resolve_distance_km("club race") == 8.0


@pytest.mark.parametrize("distance", [None, "", "   ", 0, -3, float("nan"), True, float("inf"), "1" * 400])
def test_unresolved_distance(distance):
    assert resolve_distance_km(distance) is None


def test_numeric_distance_is_kilometres():
    assert resolve_distance_km(12.5) == 12.5
    assert resolve_distance_km(42) == 42.0
