"""Athlete profile schema.

The profile is the single input of the hydration engine. It is immutable:
a changed distance or duration means building a new profile, never patching
an existing one. Keys are accepted in snake_case or in the questionnaire's
camelCase (weightKg, sessionDurationHours, trainingTempRange, ...).

Bounds here are the validation gate for untrusted input; see
hydroplan.profile.validator for the aggregated error reporting.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Sex(StrEnum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Altitude(StrEnum):
    SEA_LEVEL = "sea-level"
    MODERATE = "moderate"
    HIGH = "high"


class SunExposure(StrEnum):
    SHADE = "shade"
    PARTIAL = "partial"
    FULL_SUN = "full-sun"


class WindConditions(StrEnum):
    CALM = "calm"
    MODERATE = "moderate"
    WINDY = "windy"


class ClothingType(StrEnum):
    MINIMAL = "minimal"
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"


class IndoorOutdoor(StrEnum):
    INDOOR = "indoor"
    OUTDOOR = "outdoor"
    BOTH = "both"


class Level(StrEnum):
    """Three-step scale for sweat rate, sweat saltiness and salt intake."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CrampTiming(StrEnum):
    NONE = "none"
    EARLY = "early"
    MID = "mid"
    LATE = "late"
    POST = "post"


class PrimaryGoal(StrEnum):
    PERFORMANCE = "performance"
    ENDURANCE = "endurance"
    RECOVERY = "recovery"
    WEIGHT_LOSS = "weight-loss"
    GENERAL_HEALTH = "general-health"


class TempRange(BaseModel):
    """Training temperature range in degrees Celsius."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)

    min_c: float = Field(..., ge=-20, le=50, alias="min")
    max_c: float = Field(..., ge=-20, le=50, alias="max")

    @model_validator(mode="after")
    def validate_order(self) -> "TempRange":
        if self.min_c > self.max_c:
            raise ValueError("min must not exceed max")
        return self

    @property
    def mean_c(self) -> float:
        return (self.min_c + self.max_c) / 2


class AthleteProfile(BaseModel):
    """Complete athlete profile for one plan request.

    Required fields carry no default; hydroplan.profile.builder fills the
    questionnaire defaults before validation. session_duration_hours may be
    None until it is resolved from pace or triathlon segments.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
        extra="ignore",
    )

    # Body & physiology
    age: int = Field(..., ge=13, le=120)
    sex: Sex
    weight_kg: float = Field(..., ge=30, le=300)
    height_cm: float | None = Field(None, ge=100, le=250)
    resting_heart_rate: int | None = Field(None, ge=30, le=120)
    body_fat_pct: float | None = Field(None, ge=3, le=50)

    # Activity
    disciplines: tuple[str, ...] = Field(..., min_length=1)
    session_duration_hours: float | None = Field(None, ge=0.25, le=168)
    race_distance: str | None = None
    has_upcoming_race: bool = False
    elevation_gain_m: float | None = Field(None, ge=0, le=10000, alias="elevationGain")
    indoor_outdoor: IndoorOutdoor

    # Pace fields, free text parsed by hydroplan.pace
    avg_pace: str | None = None
    swim_pace: str | None = None
    bike_speed: str | None = None
    bike_power: str | None = None
    run_pace: str | None = None

    # Environment
    training_temp_range: TempRange
    humidity_pct: float = Field(..., ge=0, le=100)
    altitude: Altitude
    altitude_m: float | None = Field(None, ge=0, le=5000)
    sun_exposure: SunExposure
    wind_conditions: WindConditions
    clothing_type: ClothingType

    # Sweat profile
    sweat_rate: Level
    sweat_saltiness: Level
    cramp_timing: CrampTiming = CrampTiming.NONE

    # Nutrition & habits
    daily_salt_intake: Level
    daily_water_intake_l: float | None = Field(None, ge=0, le=10)
    caffeine_mg: float | None = Field(None, ge=0, le=2000)
    sleep_hours: float | None = Field(None, ge=0, le=24)
    diet_type: str | None = Field(None, max_length=50)

    # Goals
    primary_goal: PrimaryGoal | None = None
    upcoming_event: str | None = Field(None, max_length=200)
    concerns: str | None = Field(None, max_length=500)

    @property
    def primary_discipline(self) -> str:
        """First selected discipline; the only one discipline rules consult."""
        return self.disciplines[0]

    @property
    def is_triathlon(self) -> bool:
        return self.primary_discipline.strip().lower() == "triathlon"
