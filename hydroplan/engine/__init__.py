"""Engine module - deterministic hydration plan calculation.

This module provides:
- compute_plan(): profile -> three-phase fluid and electrolyte plan
- Sweat rate model helpers
- Plan audit against practical intake limits
- Plan serialization for export and persistence
"""

from hydroplan.engine.audit import AuditFinding, audit_plan
from hydroplan.engine.plan import compute_plan, during_electrolytes_per_hour
from hydroplan.engine.serializers import deserialize_plan, serialize_plan
from hydroplan.engine.sweat import (
    adjusted_sweat_rate,
    base_sweat_rate,
    discipline_adjustment_pct,
    temperature_bucket,
)
from hydroplan.engine.types import DuringActivity, HydrationPlan, PostActivity, PreActivity

__all__ = [
    "AuditFinding",
    "DuringActivity",
    "HydrationPlan",
    "PostActivity",
    "PreActivity",
    "adjusted_sweat_rate",
    "audit_plan",
    "base_sweat_rate",
    "compute_plan",
    "deserialize_plan",
    "discipline_adjustment_pct",
    "during_electrolytes_per_hour",
    "serialize_plan",
    "temperature_bucket",
]
