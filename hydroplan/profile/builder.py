"""Profile construction with explicit defaults.

The questionnaire pre-selects a value for several answers. Those defaults
live here and are applied in exactly one place, apply_profile_defaults(),
before validation. Everything in REQUIRED_FIELDS must come from the athlete
(or a wearable import) and is never defaulted.
"""

from collections.abc import Mapping
from typing import Any

from pydantic.alias_generators import to_camel

from hydroplan.profile.types import (
    Altitude,
    AthleteProfile,
    ClothingType,
    CrampTiming,
    IndoorOutdoor,
    Level,
    PrimaryGoal,
    Sex,
    SunExposure,
    WindConditions,
)

REQUIRED_FIELDS: tuple[str, ...] = (
    "age",
    "weight_kg",
    "disciplines",
    "training_temp_range",
    "humidity_pct",
)

PROFILE_DEFAULTS: dict[str, Any] = {
    "sex": Sex.MALE.value,
    "indoor_outdoor": IndoorOutdoor.OUTDOOR.value,
    "altitude": Altitude.SEA_LEVEL.value,
    "sun_exposure": SunExposure.PARTIAL.value,
    "wind_conditions": WindConditions.MODERATE.value,
    "clothing_type": ClothingType.LIGHT.value,
    "sweat_rate": Level.MEDIUM.value,
    "sweat_saltiness": Level.MEDIUM.value,
    "cramp_timing": CrampTiming.NONE.value,
    "daily_salt_intake": Level.MEDIUM.value,
    "primary_goal": PrimaryGoal.PERFORMANCE.value,
    "has_upcoming_race": False,
}


def _is_present(raw: Mapping[str, Any], field: str) -> bool:
    for key in (field, to_camel(field)):
        if raw.get(key) is not None:
            return True
    return False


def apply_profile_defaults(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Fill questionnaire defaults for answers the athlete left unset.

    Supplied values always win, whether given in snake_case or camelCase;
    None counts as unset. The input mapping is not modified.

    Args:
        raw: Partial profile (form submission or wearable import)

    Returns:
        New dict with defaults added for missing defaulted fields
    """
    completed = dict(raw)
    for field, default in PROFILE_DEFAULTS.items():
        if not _is_present(raw, field):
            completed.pop(to_camel(field), None)
            completed[field] = default
    return completed


def missing_required_fields(raw: Mapping[str, Any]) -> list[str]:
    """List required fields absent from a partial profile, in schema order."""
    return [field for field in REQUIRED_FIELDS if not _is_present(raw, field)]


def build_profile(raw: Mapping[str, Any] | None = None, **overrides: Any) -> AthleteProfile:
    """Build a validated AthleteProfile from partial input plus defaults.

    Args:
        raw: Partial profile mapping
        **overrides: Field values applied on top of raw

    Returns:
        Validated AthleteProfile

    Raises:
        pydantic.ValidationError: If the completed profile is invalid
    """
    data = {**(raw or {}), **overrides}
    return AthleteProfile.model_validate(apply_profile_defaults(data))
