"""Sweat rate model.

Deterministic, stateless helpers: temperature bucket, base sweat rate and the
primary-discipline adjustment.
"""

from hydroplan.engine.constants import (
    BASE_SWEAT_RATE_ML_PER_HOUR,
    COOL_BELOW_C,
    DISCIPLINE_SWEAT_ADJUSTMENT_PCT,
    HOT_ABOVE_C,
)
from hydroplan.utils.rounding import round_half_up


def normalize_discipline(discipline: str | None) -> str:
    """Lower-case and collapse whitespace so "Cross Fit " style input is stable."""
    if not discipline:
        return ""
    return " ".join(discipline.lower().split())


def temperature_bucket(mean_temp_c: float) -> str:
    """Classify mean training temperature as cool, moderate or hot.

    18 and 25 are both inside the moderate bucket.
    """
    if mean_temp_c < COOL_BELOW_C:
        return "cool"
    if mean_temp_c > HOT_ABOVE_C:
        return "hot"
    return "moderate"


def base_sweat_rate(mean_temp_c: float) -> int:
    """Base sweat rate in ml/h for a mean training temperature."""
    return BASE_SWEAT_RATE_ML_PER_HOUR[temperature_bucket(mean_temp_c)]


def discipline_adjustment_pct(discipline: str | None) -> int:
    """Sweat rate adjustment in percent; unknown disciplines get 0."""
    return DISCIPLINE_SWEAT_ADJUSTMENT_PCT.get(normalize_discipline(discipline), 0)


def adjusted_sweat_rate(base_rate: int, discipline: str | None) -> int:
    """Apply the discipline adjustment and round to whole ml/h."""
    return round_half_up(base_rate * (100 + discipline_adjustment_pct(discipline)) / 100)
