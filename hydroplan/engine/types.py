"""Hydration plan value objects.

Field names are stable: export and persistence key off them directly.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PreActivity:
    timing_label: str
    water_ml: int
    electrolyte_sachets: float


@dataclass(frozen=True)
class DuringActivity:
    water_ml_per_hour: int
    electrolyte_sachets_per_hour: float
    frequency_label: str


@dataclass(frozen=True)
class PostActivity:
    water_ml: int
    electrolyte_sachets: float
    timing_label: str


@dataclass(frozen=True)
class HydrationPlan:
    """Three-phase fluid and electrolyte plan.

    Attributes:
        pre_activity: Intake before the session
        during_activity: Hourly intake during the session
        post_activity: Intake after the session
        total_fluid_loss_ml: Modeled sweat loss over the whole session
        sweat_rate_ml_per_hour: Modeled hourly sweat rate after discipline adjustment
        recommendations: Rationale strings, displayed by index
        calculation_steps: One string per derivation step, in computation order
        telemetry_enhanced: True when wearable telemetry accompanied the request
    """

    pre_activity: PreActivity
    during_activity: DuringActivity
    post_activity: PostActivity
    total_fluid_loss_ml: float
    sweat_rate_ml_per_hour: int
    recommendations: tuple[str, ...]
    calculation_steps: tuple[str, ...]
    telemetry_enhanced: bool = False
