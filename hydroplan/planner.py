"""Planning pipeline.

Raw submission -> defaults -> sanitize/validate -> resolve session duration
-> engine -> warnings and audit. Every step returns new values; profiles are
never mutated.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from hydroplan.engine.audit import AuditFinding, audit_plan
from hydroplan.engine.plan import compute_plan
from hydroplan.engine.types import HydrationPlan
from hydroplan.errors import DurationUnresolvedError, ProfileValidationError
from hydroplan.pace.converter import duration_from_pace
from hydroplan.profile.builder import apply_profile_defaults
from hydroplan.profile.types import AthleteProfile
from hydroplan.profile.validator import validate_and_sanitize_profile
from hydroplan.profile.warnings import get_profile_warnings
from hydroplan.triathlon.calculator import compute_total_duration


@dataclass(frozen=True)
class PlanResult:
    """Plan plus the context shown alongside it.

    Attributes:
        profile: Validated profile with resolved session duration
        plan: Computed hydration plan
        warnings: Soft profile warnings
        audit: Practical-limit findings for the plan
    """

    profile: AthleteProfile
    plan: HydrationPlan
    warnings: list[str] = field(default_factory=list)
    audit: list[AuditFinding] = field(default_factory=list)


def resolve_session_duration(profile: AthleteProfile) -> float | None:
    """Determine session duration for a profile.

    A directly supplied duration wins. Otherwise triathletes need all three
    segment inputs; other disciplines use avg_pace over race_distance.

    Args:
        profile: Validated profile

    Returns:
        Duration in hours, or None if it cannot be determined
    """
    if profile.session_duration_hours is not None:
        return profile.session_duration_hours

    if profile.is_triathlon:
        return compute_total_duration(
            profile.race_distance,
            profile.swim_pace,
            profile.bike_speed or profile.bike_power,
            profile.run_pace,
        )

    return duration_from_pace(profile.primary_discipline, profile.avg_pace, profile.race_distance)


def with_resolved_duration(profile: AthleteProfile) -> AthleteProfile:
    """Return a profile carrying the resolved duration.

    Returns the same profile when the duration was supplied or cannot be
    resolved; otherwise a new profile with session_duration_hours set.
    """
    if profile.session_duration_hours is not None:
        return profile

    hours = resolve_session_duration(profile)
    if hours is None:
        return profile

    logger.info(
        "planner: Derived session duration",
        discipline=profile.primary_discipline,
        race_distance=profile.race_distance,
        session_hours=round(hours, 3),
    )
    return profile.model_copy(update={"session_duration_hours": hours})


def plan_from_submission(raw: Mapping[str, Any], telemetry: Any = None) -> PlanResult:
    """Run a raw questionnaire submission through the full pipeline.

    Args:
        raw: Submitted profile (snake_case or camelCase keys)
        telemetry: Optional wearable-derived data

    Returns:
        PlanResult

    Raises:
        ProfileValidationError: If the submission fails validation
        DurationUnresolvedError: If no session duration can be determined
    """
    result = validate_and_sanitize_profile(apply_profile_defaults(raw))
    if result.profile is None:
        raise ProfileValidationError(result.errors)

    profile = with_resolved_duration(result.profile)
    if profile.session_duration_hours is None:
        logger.warning(
            "planner: Session duration unresolved",
            discipline=profile.primary_discipline,
            race_distance=profile.race_distance,
        )
        raise DurationUnresolvedError(
            "not supplied and could not be derived from pace, race distance or triathlon segments"
        )

    plan = compute_plan(profile, telemetry)
    return PlanResult(
        profile=profile,
        plan=plan,
        warnings=get_profile_warnings(profile),
        audit=audit_plan(profile, plan),
    )
