"""Pace <-> duration conversion for a known race distance.

Both directions are pure functions. A duration re-derived from a formatted
pace can differ from the input duration by one rounding unit (one second of pace,
or 0.1 km/h for cycling).
"""

import math

from hydroplan.pace.distances import resolve_distance_km
from hydroplan.pace.parsing import pace_kind_for_discipline, parse_pace
from hydroplan.pace.types import CyclingSpeed, PaceKind, RunPace, SwimPace

_PACE_TYPES: dict[PaceKind, type[RunPace] | type[SwimPace] | type[CyclingSpeed]] = {
    PaceKind.RUN: RunPace,
    PaceKind.SWIM: SwimPace,
    PaceKind.CYCLE: CyclingSpeed,
}


def duration_from_pace(
    discipline: str,
    pace_text: str | None,
    distance: float | str | None,
) -> float | None:
    """Compute session duration from pace and race distance.

    Args:
        discipline: Discipline name (Running/Hiking, Swimming, Cycling)
        pace_text: "M:SS" per km, "M:SS" per 100 m, or "<number> km/h"
        distance: Distance in km or a race name (e.g., "Half Marathon")

    Returns:
        Duration in hours, or None if the discipline has no pace grammar,
        the pace does not parse, or the distance is unresolved
    """
    kind = pace_kind_for_discipline(discipline)
    if kind is None:
        return None

    pace = parse_pace(kind, pace_text)
    if pace is None:
        return None

    distance_km = resolve_distance_km(distance)
    if distance_km is None:
        return None

    return pace.hours_for(distance_km)


def pace_from_duration(
    discipline: str,
    hours: float | None,
    distance: float | str | None,
) -> str | None:
    """Compute pace text from session duration and race distance.

    Args:
        discipline: Discipline name (Running/Hiking, Swimming, Cycling)
        hours: Session duration in hours
        distance: Distance in km or a race name

    Returns:
        "M:SS", "M:SS/100m" or "X.X km/h", or None if the inputs cannot
        produce a pace
    """
    kind = pace_kind_for_discipline(discipline)
    if kind is None:
        return None

    if hours is None or not math.isfinite(hours) or hours <= 0:
        return None

    distance_km = resolve_distance_km(distance)
    if distance_km is None:
        return None

    pace = _PACE_TYPES[kind].from_duration(hours, distance_km)
    return pace.format() if pace is not None else None
