"""Serializers for HydrationPlan - JSON serialization utilities."""

from dataclasses import asdict
from typing import Any

from hydroplan.engine.types import DuringActivity, HydrationPlan, PostActivity, PreActivity


def serialize_plan(plan: HydrationPlan) -> dict[str, Any]:
    """Serialize HydrationPlan to a JSON-serializable dict.

    Keys are the dataclass field names; export and persistence rely on them.

    Args:
        plan: HydrationPlan to serialize

    Returns:
        JSON-serializable dictionary
    """
    data = asdict(plan)
    data["recommendations"] = list(plan.recommendations)
    data["calculation_steps"] = list(plan.calculation_steps)
    return data


def deserialize_plan(data: dict[str, Any]) -> HydrationPlan:
    """Deserialize a dict produced by serialize_plan.

    Args:
        data: Dictionary containing plan data

    Returns:
        HydrationPlan object
    """
    return HydrationPlan(
        pre_activity=PreActivity(**data["pre_activity"]),
        during_activity=DuringActivity(**data["during_activity"]),
        post_activity=PostActivity(**data["post_activity"]),
        total_fluid_loss_ml=data["total_fluid_loss_ml"],
        sweat_rate_ml_per_hour=data["sweat_rate_ml_per_hour"],
        recommendations=tuple(data["recommendations"]),
        calculation_steps=tuple(data["calculation_steps"]),
        telemetry_enhanced=data.get("telemetry_enhanced", False),
    )
