import pytest

from hydroplan.engine.sweat import (
    adjusted_sweat_rate,
    base_sweat_rate,
    discipline_adjustment_pct,
    normalize_discipline,
    temperature_bucket,
)


@pytest.mark.parametrize(
    ("mean_temp", "bucket"),
    [
        (-10, "cool"),
        (17.9, "cool"),
        (18, "moderate"),
        (21.5, "moderate"),
        (25, "moderate"),
        (25.1, "hot"),
        (40, "hot"),
    ],
)
def test_temperature_bucket(mean_temp, bucket):
    assert temperature_bucket(mean_temp) == bucket


def test_base_sweat_rate_by_bucket():
    assert base_sweat_rate(10) == 600
    assert base_sweat_rate(20) == 800
    assert base_sweat_rate(30) == 1100


def test_normalize_discipline():
    assert normalize_discipline("  Trail   Running ") == "trail running"
    assert normalize_discipline("") == ""
    assert normalize_discipline(None) == ""


def test_unknown_discipline_has_no_adjustment():
    assert discipline_adjustment_pct("Padel") == 0
    assert discipline_adjustment_pct(None) == 0


def test_adjusted_sweat_rate_rounds_half_up():
    # 1100 x 0.85 = 935, 600 x 0.8 = 480, 1100 x 1.1 = 1210
    assert adjusted_sweat_rate(1100, "Swimming") == 935
    assert adjusted_sweat_rate(600, "Walking") == 480
    assert adjusted_sweat_rate(1100, "Running") == 1210
