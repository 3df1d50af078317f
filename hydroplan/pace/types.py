"""Typed pace representations.

Pace text is parsed once at the boundary into one of three tagged types,
each carrying its own unit:
- RunPace: seconds per kilometre (running, hiking, walking)
- SwimPace: seconds per 100 metres
- CyclingSpeed: kilometres per hour

Downstream code never re-parses strings.
"""

import math
from dataclasses import dataclass
from enum import StrEnum

from hydroplan.utils.rounding import round_half_up, round_half_up_to


class PaceKind(StrEnum):
    RUN = "run"
    SWIM = "swim"
    CYCLE = "cycle"


def format_minutes_seconds(total_seconds: int) -> str:
    """Format a number of seconds as "M:SS"."""
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"


@dataclass(frozen=True)
class RunPace:
    """Running/hiking pace in seconds per kilometre."""

    seconds_per_km: int

    def hours_for(self, distance_km: float) -> float:
        return distance_km * self.seconds_per_km / 3600

    def format(self) -> str:
        return format_minutes_seconds(self.seconds_per_km)

    @classmethod
    def from_duration(cls, hours: float, distance_km: float) -> "RunPace | None":
        """Pace for a duration over a distance; None if it is not finite or rounds to 0:00."""
        seconds = hours * 3600 / distance_km
        if not math.isfinite(seconds):
            return None
        rounded = round_half_up(seconds)
        return cls(seconds_per_km=rounded) if rounded > 0 else None


@dataclass(frozen=True)
class SwimPace:
    """Swimming pace in seconds per 100 metres."""

    seconds_per_100m: int

    def hours_for(self, distance_km: float) -> float:
        # 10 lengths of 100 m per kilometre
        return distance_km * 10 * self.seconds_per_100m / 3600

    def format(self) -> str:
        return f"{format_minutes_seconds(self.seconds_per_100m)}/100m"

    @classmethod
    def from_duration(cls, hours: float, distance_km: float) -> "SwimPace | None":
        seconds = hours * 3600 / (distance_km * 10)
        if not math.isfinite(seconds):
            return None
        rounded = round_half_up(seconds)
        return cls(seconds_per_100m=rounded) if rounded > 0 else None


@dataclass(frozen=True)
class CyclingSpeed:
    """Cycling speed in kilometres per hour."""

    kmh: float

    def hours_for(self, distance_km: float) -> float:
        return distance_km / self.kmh

    def format(self) -> str:
        return f"{self.kmh:.1f} km/h"

    @classmethod
    def from_duration(cls, hours: float, distance_km: float) -> "CyclingSpeed | None":
        kmh = distance_km / hours
        if not math.isfinite(kmh):
            return None
        rounded = round_half_up_to(kmh, 1)
        return cls(kmh=rounded) if rounded > 0 else None


Pace = RunPace | SwimPace | CyclingSpeed
