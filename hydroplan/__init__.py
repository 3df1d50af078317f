"""hydroplan - personalized fluid and electrolyte plans for endurance athletes."""

from hydroplan.core.logger import configure_logging
from hydroplan.engine import HydrationPlan, compute_plan
from hydroplan.planner import PlanResult, plan_from_submission, resolve_session_duration
from hydroplan.profile import AthleteProfile, validate_and_sanitize_profile

__all__ = [
    "AthleteProfile",
    "HydrationPlan",
    "PlanResult",
    "compute_plan",
    "configure_logging",
    "plan_from_submission",
    "resolve_session_duration",
    "validate_and_sanitize_profile",
]
