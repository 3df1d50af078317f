"""Triathlon segment duration calculator.

Decomposes a standard race into swim, bike and run segments and sums their
durations. A result is produced only when the race resolves and all three
segment inputs parse; there is no partial estimate. Transition time is not
included: the total is the strict sum of the three segments.
"""

import re
from dataclasses import dataclass

from loguru import logger

from hydroplan.pace.parsing import parse_cycling_speed, parse_run_pace, parse_swim_pace
from hydroplan.pace.types import CyclingSpeed, RunPace, SwimPace
from hydroplan.triathlon.constants import (
    TRIATHLON_ALIASES,
    TRIATHLON_DISTANCES,
    SegmentDistances,
    TriathlonRace,
)

_ALIAS_PATTERNS: tuple[tuple[re.Pattern[str], TriathlonRace], ...] = tuple(
    (re.compile(rf"(?<![\w.]){re.escape(alias)}(?![\w.])"), race) for alias, race in TRIATHLON_ALIASES
)


@dataclass(frozen=True)
class SegmentBreakdown:
    """One segment of a triathlon.

    Attributes:
        distance_km: Segment distance in kilometres
        pace: Parsed pace or speed used for the segment
        duration_hours: Segment duration in hours
    """

    distance_km: float
    pace: SwimPace | CyclingSpeed | RunPace
    duration_hours: float


@dataclass(frozen=True)
class TriathlonBreakdown:
    """Per-segment durations plus their sum (transitions excluded)."""

    race: TriathlonRace
    swim: SegmentBreakdown
    bike: SegmentBreakdown
    run: SegmentBreakdown
    total_hours: float


def resolve_race_type(text: str | TriathlonRace | None) -> TriathlonRace | None:
    """Resolve a race name to a standard triathlon.

    Args:
        text: Race name (e.g., "Olympic", "Ironman 70.3", " HALF-IRONMAN ")

    Returns:
        TriathlonRace, or None if the name is not a recognised triathlon
    """
    if text is None:
        return None
    if isinstance(text, TriathlonRace):
        return text

    normalized = " ".join(text.lower().replace("-", " ").split())
    if not normalized:
        return None

    for pattern, race in _ALIAS_PATTERNS:
        if pattern.search(normalized):
            return race
    return None


def get_breakdown(
    race_type: str | TriathlonRace | None,
    swim_pace: str | None,
    bike_speed: str | None,
    run_pace: str | None,
) -> TriathlonBreakdown | None:
    """Compute per-segment triathlon durations.

    Args:
        race_type: Race name or TriathlonRace
        swim_pace: Swim pace "M:SS" per 100 m
        bike_speed: Bike speed "<number> km/h"
        run_pace: Run pace "M:SS" per km

    Returns:
        TriathlonBreakdown, or None unless the race resolves and all three
        segment inputs parse
    """
    race = resolve_race_type(race_type)
    if race is None:
        return None

    swim = parse_swim_pace(swim_pace)
    bike = parse_cycling_speed(bike_speed)
    run = parse_run_pace(run_pace)
    if swim is None or bike is None or run is None:
        logger.debug(
            "triathlon_calculator: Missing segment input, no estimate",
            race=race.value,
            swim_parsed=swim is not None,
            bike_parsed=bike is not None,
            run_parsed=run is not None,
        )
        return None

    distances: SegmentDistances = TRIATHLON_DISTANCES[race]
    swim_segment = SegmentBreakdown(distances.swim_km, swim, swim.hours_for(distances.swim_km))
    bike_segment = SegmentBreakdown(distances.bike_km, bike, bike.hours_for(distances.bike_km))
    run_segment = SegmentBreakdown(distances.run_km, run, run.hours_for(distances.run_km))
    total_hours = swim_segment.duration_hours + bike_segment.duration_hours + run_segment.duration_hours

    logger.debug(
        "triathlon_calculator: Computed race duration",
        race=race.value,
        swim_min=round(swim_segment.duration_hours * 60, 1),
        bike_min=round(bike_segment.duration_hours * 60, 1),
        run_min=round(run_segment.duration_hours * 60, 1),
        total_hours=round(total_hours, 2),
    )

    return TriathlonBreakdown(
        race=race,
        swim=swim_segment,
        bike=bike_segment,
        run=run_segment,
        total_hours=total_hours,
    )


def compute_total_duration(
    race_type: str | TriathlonRace | None,
    swim_pace: str | None,
    bike_speed: str | None,
    run_pace: str | None,
) -> float | None:
    """Compute total triathlon duration in hours (transitions excluded).

    Returns:
        Total hours, or None unless all three segment inputs parse
    """
    breakdown = get_breakdown(race_type, swim_pace, bike_speed, run_pace)
    return breakdown.total_hours if breakdown is not None else None
