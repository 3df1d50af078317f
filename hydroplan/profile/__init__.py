"""Profile module - athlete profile schema, defaults, validation and warnings."""

from hydroplan.profile.builder import (
    PROFILE_DEFAULTS,
    REQUIRED_FIELDS,
    apply_profile_defaults,
    build_profile,
    missing_required_fields,
)
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
    TempRange,
    WindConditions,
)
from hydroplan.profile.validator import (
    ProfileValidationResult,
    sanitize_string,
    validate_and_sanitize_profile,
)
from hydroplan.profile.warnings import get_profile_warnings

__all__ = [
    "PROFILE_DEFAULTS",
    "REQUIRED_FIELDS",
    "Altitude",
    "AthleteProfile",
    "ClothingType",
    "CrampTiming",
    "IndoorOutdoor",
    "Level",
    "PrimaryGoal",
    "ProfileValidationResult",
    "Sex",
    "SunExposure",
    "TempRange",
    "WindConditions",
    "apply_profile_defaults",
    "build_profile",
    "get_profile_warnings",
    "missing_required_fields",
    "sanitize_string",
    "validate_and_sanitize_profile",
]
