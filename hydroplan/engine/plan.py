"""Hydration plan engine.

compute_plan() turns a completed AthleteProfile into a three-phase plan:

1. Base sweat rate from mean training temperature
2. Primary-discipline adjustment of the sweat rate
3. Total fluid loss over the session
4. Pre-activity water from body weight, additive percentage adjustments
5. Pre-activity electrolytes (fixed)
6. During-activity water: fixed share of hourly sweat loss
7. During-activity electrolytes: sweat rate x saltiness decision table
8. Post-activity water: multiple of the deficit left after the session
9. Post-activity electrolytes from post water, at least one sachet
10. Recommendation notes, in a fixed order

The function is pure: no state, no I/O beyond debug logging, and identical
profiles yield identical plans. Each step appends to calculation_steps.
"""

import math
from typing import Any

from loguru import logger

from hydroplan.engine.constants import (
    ALTITUDE_NOTE,
    CRAMP_NOTE,
    DURING_FREQUENCY_LABEL,
    DURING_REPLACEMENT_PCT,
    DURING_SACHETS_BASE,
    DURING_SACHETS_BOTH_HIGH,
    DURING_SACHETS_BOTH_LOW,
    DURING_SACHETS_ONE_HIGH,
    ELECTROLYTE_ATTENTION_NOTE,
    ELEVATION_NOTE,
    ELEVATION_NOTE_M,
    HEAT_NOTE,
    HOT_ABOVE_C,
    LONG_SESSION_NOTE,
    LONG_SESSION_NOTE_HOURS,
    LOW_SALT_NOTE,
    NO_MIXING_FACT,
    POST_MIN_SACHETS,
    POST_ML_PER_SACHET,
    POST_REPLACEMENT_PCT,
    POST_TIMING_LABEL,
    PRE_ALTITUDE_PCT,
    PRE_COOL_PCT,
    PRE_DISCIPLINE_PCT,
    PRE_ELECTROLYTE_SACHETS,
    PRE_FULL_SUN_PCT,
    PRE_HOT_PCT,
    PRE_LONG_SESSION_HOURS,
    PRE_LONG_SESSION_PCT,
    PRE_MEDIUM_SESSION_HOURS,
    PRE_MEDIUM_SESSION_PCT,
    PRE_TIMING_LABEL,
    PRE_WATER_ML_PER_KG,
    SACHET_COMPOSITION_FACT,
    SUN_NOTE,
    TELEMETRY_NOTE,
    URINE_COLOR_TIP,
)
from hydroplan.engine.sweat import (
    adjusted_sweat_rate,
    base_sweat_rate,
    discipline_adjustment_pct,
    normalize_discipline,
    temperature_bucket,
)
from hydroplan.engine.telemetry import is_telemetry_usable
from hydroplan.engine.types import DuringActivity, HydrationPlan, PostActivity, PreActivity
from hydroplan.errors import PlanPreconditionError
from hydroplan.profile.types import Altitude, AthleteProfile, CrampTiming, Level, SunExposure
from hydroplan.utils.rounding import round_half_up


def _check_preconditions(profile: AthleteProfile) -> float:
    """Validate engine preconditions and return the session duration.

    Raises:
        PlanPreconditionError: If weight, temperature range or duration is unusable
    """
    weight = getattr(profile, "weight_kg", None)
    if weight is None or not math.isfinite(weight) or weight <= 0:
        raise PlanPreconditionError("weight_kg", f"must be a positive number, got {weight!r}")

    if getattr(profile, "training_temp_range", None) is None:
        raise PlanPreconditionError("training_temp_range", "is required")

    hours = profile.session_duration_hours
    if hours is None:
        raise PlanPreconditionError(
            "session_duration_hours",
            "is required; supply it or derive it from pace or triathlon segments",
        )
    if not math.isfinite(hours) or hours <= 0:
        raise PlanPreconditionError("session_duration_hours", f"must be a positive number, got {hours!r}")

    return hours


def during_electrolytes_per_hour(sweat_rate: Level, sweat_saltiness: Level) -> float:
    """Hourly sachets during activity.

    Both high -> 2.0; exactly one high -> 1.5; both low -> 0.5; else 1.0.
    """
    high_rate = sweat_rate == Level.HIGH
    high_salt = sweat_saltiness == Level.HIGH
    if high_rate and high_salt:
        return DURING_SACHETS_BOTH_HIGH
    if high_rate or high_salt:
        return DURING_SACHETS_ONE_HIGH
    if sweat_rate == Level.LOW and sweat_saltiness == Level.LOW:
        return DURING_SACHETS_BOTH_LOW
    return DURING_SACHETS_BASE


def _pre_activity_adjustments(profile: AthleteProfile, mean_temp_c: float, hours: float) -> list[tuple[str, int]]:
    adjustments: list[tuple[str, int]] = []

    bucket = temperature_bucket(mean_temp_c)
    if bucket == "hot":
        adjustments.append(("hot conditions", PRE_HOT_PCT))
    elif bucket == "cool":
        adjustments.append(("cool conditions", PRE_COOL_PCT))

    discipline = normalize_discipline(profile.primary_discipline)
    if discipline in PRE_DISCIPLINE_PCT:
        adjustments.append((discipline, PRE_DISCIPLINE_PCT[discipline]))

    if hours >= PRE_LONG_SESSION_HOURS:
        adjustments.append((f"session of {PRE_LONG_SESSION_HOURS}h or more", PRE_LONG_SESSION_PCT))
    elif hours >= PRE_MEDIUM_SESSION_HOURS:
        adjustments.append((f"session of {PRE_MEDIUM_SESSION_HOURS}-{PRE_LONG_SESSION_HOURS}h", PRE_MEDIUM_SESSION_PCT))

    altitude_pct = PRE_ALTITUDE_PCT.get(profile.altitude.value)
    if altitude_pct is not None:
        adjustments.append((f"{profile.altitude.value} altitude", altitude_pct))

    if profile.sun_exposure == SunExposure.FULL_SUN:
        adjustments.append(("full sun", PRE_FULL_SUN_PCT))

    return adjustments


def _build_recommendations(profile: AthleteProfile, mean_temp_c: float, hours: float, enhanced: bool) -> list[str]:
    recommendations: list[str] = []

    if enhanced:
        recommendations.append(TELEMETRY_NOTE)
    if profile.sweat_rate == Level.HIGH or profile.sweat_saltiness == Level.HIGH:
        recommendations.append(ELECTROLYTE_ATTENTION_NOTE)
    if mean_temp_c > HOT_ABOVE_C:
        recommendations.append(HEAT_NOTE)
    if hours > LONG_SESSION_NOTE_HOURS:
        recommendations.append(LONG_SESSION_NOTE)
    if profile.altitude != Altitude.SEA_LEVEL:
        recommendations.append(ALTITUDE_NOTE)
    if profile.sun_exposure == SunExposure.FULL_SUN:
        recommendations.append(SUN_NOTE)
    if profile.elevation_gain_m is not None and profile.elevation_gain_m > ELEVATION_NOTE_M:
        recommendations.append(ELEVATION_NOTE)
    if profile.cramp_timing is not None and profile.cramp_timing != CrampTiming.NONE:
        recommendations.append(CRAMP_NOTE)
    if profile.daily_salt_intake == Level.LOW:
        recommendations.append(LOW_SALT_NOTE)

    recommendations.append(URINE_COLOR_TIP)
    recommendations.append(SACHET_COMPOSITION_FACT)
    recommendations.append(NO_MIXING_FACT)
    return recommendations


def compute_plan(profile: AthleteProfile, telemetry: Any = None) -> HydrationPlan:
    """Compute a hydration plan for a completed profile.

    Args:
        profile: Validated profile with session_duration_hours resolved
        telemetry: Optional wearable-derived data; only its presence is used

    Returns:
        HydrationPlan

    Raises:
        PlanPreconditionError: If weight is not positive, the temperature range
            is missing, or the session duration is missing or not positive
    """
    hours = _check_preconditions(profile)
    steps: list[str] = []

    # 1. Base sweat rate
    temp_range = profile.training_temp_range
    mean_temp_c = temp_range.mean_c
    base_rate = base_sweat_rate(mean_temp_c)
    steps.append(
        f"Average training temperature: ({temp_range.min_c:g} + {temp_range.max_c:g}) / 2 = {mean_temp_c:g}°C "
        f"({temperature_bucket(mean_temp_c)})"
    )
    steps.append(f"Base sweat rate: {base_rate} ml/h")

    # 2. Discipline adjustment
    discipline = profile.primary_discipline
    adjustment_pct = discipline_adjustment_pct(discipline)
    sweat_rate = adjusted_sweat_rate(base_rate, discipline)
    steps.append(f"Discipline adjustment ({discipline}): {adjustment_pct:+d}% -> {sweat_rate} ml/h")

    # 3. Total fluid loss
    total_fluid_loss = sweat_rate * hours
    steps.append(f"Total fluid loss: {sweat_rate} ml/h x {hours:g} h = {total_fluid_loss:g} ml")

    # 4. Pre-activity water
    pre_base = profile.weight_kg * PRE_WATER_ML_PER_KG
    steps.append(f"Pre-activity base: {profile.weight_kg:g} kg x {PRE_WATER_ML_PER_KG} ml/kg = {pre_base:g} ml")
    pre_adjustments = _pre_activity_adjustments(profile, mean_temp_c, hours)
    for label, pct in pre_adjustments:
        steps.append(f"Pre-activity adjustment ({label}): {pct:+d}%")
    net_pre_pct = sum(pct for _label, pct in pre_adjustments)
    pre_water = round_half_up(pre_base * (100 + net_pre_pct) / 100)
    steps.append(f"Pre-activity water: net {net_pre_pct:+d}% -> {pre_water} ml")

    # 5. Pre-activity electrolytes
    steps.append(f"Pre-activity electrolytes: {PRE_ELECTROLYTE_SACHETS} sachet (cramp prevention)")

    # 6. During-activity water
    during_water = round_half_up(sweat_rate * DURING_REPLACEMENT_PCT / 100)
    steps.append(f"During-activity water: {sweat_rate} ml/h x {DURING_REPLACEMENT_PCT}% = {during_water} ml/h")

    # 7. During-activity electrolytes
    during_sachets = during_electrolytes_per_hour(profile.sweat_rate, profile.sweat_saltiness)
    steps.append(
        f"During-activity electrolytes: sweat rate {profile.sweat_rate.value}, "
        f"saltiness {profile.sweat_saltiness.value} -> {during_sachets:g} sachets/h"
    )

    # 8. Post-activity water
    remaining_deficit = total_fluid_loss - during_water * hours
    post_water = round_half_up(max(0.0, remaining_deficit) * POST_REPLACEMENT_PCT / 100)
    steps.append(
        f"Post-activity water: max(0, {total_fluid_loss:g} - {during_water} x {hours:g}) x "
        f"{POST_REPLACEMENT_PCT}% = {post_water} ml"
    )

    # 9. Post-activity electrolytes
    post_sachets = max(POST_MIN_SACHETS, round_half_up(post_water / POST_ML_PER_SACHET))
    steps.append(f"Post-activity electrolytes: max({POST_MIN_SACHETS}, {post_water} / {POST_ML_PER_SACHET}) = {post_sachets} sachets")

    # 10. Recommendations
    enhanced = is_telemetry_usable(telemetry)
    recommendations = _build_recommendations(profile, mean_temp_c, hours, enhanced)

    logger.debug(
        "hydration_engine: Computed plan",
        discipline=discipline,
        sweat_rate_ml_per_hour=sweat_rate,
        session_hours=hours,
        total_fluid_loss_ml=total_fluid_loss,
        pre_water_ml=pre_water,
        during_water_ml_per_hour=during_water,
        post_water_ml=post_water,
        telemetry_enhanced=enhanced,
    )

    return HydrationPlan(
        pre_activity=PreActivity(
            timing_label=PRE_TIMING_LABEL,
            water_ml=pre_water,
            electrolyte_sachets=PRE_ELECTROLYTE_SACHETS,
        ),
        during_activity=DuringActivity(
            water_ml_per_hour=during_water,
            electrolyte_sachets_per_hour=during_sachets,
            frequency_label=DURING_FREQUENCY_LABEL,
        ),
        post_activity=PostActivity(
            water_ml=post_water,
            electrolyte_sachets=post_sachets,
            timing_label=POST_TIMING_LABEL,
        ),
        total_fluid_loss_ml=total_fluid_loss,
        sweat_rate_ml_per_hour=sweat_rate,
        recommendations=tuple(recommendations),
        calculation_steps=tuple(steps),
        telemetry_enhanced=enhanced,
    )
