"""Plan audit - flags known tensions between the formula and practice.

The engine implements the documented formula without caps. This audit
reports where a computed plan crosses practical limits so a reviewer can
decide; it never changes the plan.

Checks, in reporting order:
- PRE_WATER_PER_KG: pre-activity water above 10 ml/kg body weight
- DURING_WATER_LIMIT: during-activity water above 1100 ml/h
- SWIM_INTAKE: swimming with during-activity water above 400 ml/h
- SHORT_SESSION_PRELOAD: pre-activity water above the session's total fluid loss
"""

from dataclasses import dataclass
from typing import Literal

from hydroplan.engine.sweat import normalize_discipline
from hydroplan.engine.types import HydrationPlan
from hydroplan.profile.types import AthleteProfile

PRE_WATER_LIMIT_ML_PER_KG = 10
DURING_WATER_LIMIT_ML_PER_HOUR = 1100
SWIM_INTAKE_LIMIT_ML_PER_HOUR = 400

Severity = Literal["CRITICAL", "HIGH", "MEDIUM"]


@dataclass(frozen=True)
class AuditFinding:
    """One audit finding.

    Attributes:
        severity: CRITICAL, HIGH or MEDIUM
        category: Stable finding code (e.g., "DURING_WATER_LIMIT")
        message: Human-readable description with the offending values
    """

    severity: Severity
    category: str
    message: str


def audit_plan(profile: AthleteProfile, plan: HydrationPlan) -> list[AuditFinding]:
    """Check a computed plan against practical intake limits.

    Args:
        profile: Profile the plan was computed from
        plan: Computed plan

    Returns:
        Findings in a fixed order; empty when nothing is flagged
    """
    findings: list[AuditFinding] = []

    pre_ml_per_kg = plan.pre_activity.water_ml / profile.weight_kg
    if pre_ml_per_kg > PRE_WATER_LIMIT_ML_PER_KG:
        findings.append(
            AuditFinding(
                severity="HIGH",
                category="PRE_WATER_PER_KG",
                message=(
                    f"Pre-activity water {plan.pre_activity.water_ml} ml is {pre_ml_per_kg:.1f} ml/kg, "
                    f"above {PRE_WATER_LIMIT_ML_PER_KG} ml/kg"
                ),
            )
        )

    during_ml = plan.during_activity.water_ml_per_hour
    if during_ml > DURING_WATER_LIMIT_ML_PER_HOUR:
        findings.append(
            AuditFinding(
                severity="CRITICAL",
                category="DURING_WATER_LIMIT",
                message=f"During-activity water {during_ml} ml/h exceeds {DURING_WATER_LIMIT_ML_PER_HOUR} ml/h",
            )
        )

    if normalize_discipline(profile.primary_discipline) == "swimming" and during_ml > SWIM_INTAKE_LIMIT_ML_PER_HOUR:
        findings.append(
            AuditFinding(
                severity="HIGH",
                category="SWIM_INTAKE",
                message=(
                    f"During-activity water {during_ml} ml/h is impractical while swimming "
                    f"(about {SWIM_INTAKE_LIMIT_ML_PER_HOUR} ml/h is realistic)"
                ),
            )
        )

    if plan.pre_activity.water_ml > plan.total_fluid_loss_ml:
        findings.append(
            AuditFinding(
                severity="MEDIUM",
                category="SHORT_SESSION_PRELOAD",
                message=(
                    f"Pre-activity water {plan.pre_activity.water_ml} ml exceeds the session's total fluid loss "
                    f"of {plan.total_fluid_loss_ml:g} ml"
                ),
            )
        )

    return findings
