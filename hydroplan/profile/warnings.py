"""Soft profile warnings.

Plausibility hints shown next to the questionnaire. They never block a plan;
hard limits are enforced by the validator.
"""

from hydroplan.profile.types import AthleteProfile, CrampTiming, Level

UNUSUAL_WEIGHT_KG = (40, 150)
UNUSUAL_AGE = (15, 80)
ULTRA_SESSION_HOURS = 12
EXTREME_HEAT_C = 35
VERY_HIGH_HUMIDITY_PCT = 80
LARGE_ELEVATION_GAIN_M = 2000


def get_profile_warnings(profile: AthleteProfile) -> list[str]:
    """Collect non-blocking warnings for unusual profile values.

    Args:
        profile: Validated athlete profile

    Returns:
        Warning strings in a fixed order
    """
    warnings: list[str] = []

    if not UNUSUAL_WEIGHT_KG[0] <= profile.weight_kg <= UNUSUAL_WEIGHT_KG[1]:
        warnings.append("Unusual weight detected. Please verify this value for accurate calculations.")

    if not UNUSUAL_AGE[0] <= profile.age <= UNUSUAL_AGE[1]:
        warnings.append("Unusual age detected. Consider consulting a sports physician for personalized guidance.")

    if profile.session_duration_hours is not None and profile.session_duration_hours > ULTRA_SESSION_HOURS:
        warnings.append(
            "Extended session duration detected. Ultra-endurance events require specialized hydration "
            "strategies; consider professional guidance."
        )

    if profile.sweat_rate == Level.HIGH and profile.sweat_saltiness == Level.HIGH:
        warnings.append(
            "High sweat rate with high saltiness suggests significant sodium loss. "
            "Professional sweat testing is highly recommended."
        )

    if profile.training_temp_range.max_c > EXTREME_HEAT_C:
        warnings.append("Extreme heat conditions detected. Exercise caution and consider adjusting activity timing.")

    if profile.humidity_pct > VERY_HIGH_HUMIDITY_PCT:
        warnings.append("Very high humidity significantly impairs cooling. Reduce intensity and increase fluid intake.")

    if profile.cramp_timing != CrampTiming.NONE:
        warnings.append("Regular cramping may indicate electrolyte imbalance or other issues. Consider medical evaluation.")

    if profile.elevation_gain_m is not None and profile.elevation_gain_m > LARGE_ELEVATION_GAIN_M:
        warnings.append("Significant elevation gain increases energy and fluid demands. Plan accordingly.")

    return warnings
