"""Pace text parsing.

Grammars (case-insensitive, surrounding whitespace ignored):
- run:   "M:SS", optionally followed by "/km" or "min/km"
- swim:  "M:SS", optionally followed by "/100m"
- cycle: "<number>", optionally followed by "km/h", "kmh" or "kph"

Text that does not match yields None; parsing never raises.
"""

import re

from hydroplan.pace.types import CyclingSpeed, Pace, PaceKind, RunPace, SwimPace

_RUN_PACE_RE = re.compile(r"^\s*(\d{1,3}):([0-5]\d)\s*(?:(?:min\s*)?/\s*km)?\s*$", re.IGNORECASE)
_SWIM_PACE_RE = re.compile(r"^\s*(\d{1,3}):([0-5]\d)\s*(?:/\s*100\s*m)?\s*$", re.IGNORECASE)
_CYCLING_SPEED_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(?:km\s*/?\s*h|kph)?\s*$", re.IGNORECASE)

_DISCIPLINE_PACE_KINDS: dict[str, PaceKind] = {
    "running": PaceKind.RUN,
    "trail running": PaceKind.RUN,
    "hiking": PaceKind.RUN,
    "walking": PaceKind.RUN,
    "swimming": PaceKind.SWIM,
    "cycling": PaceKind.CYCLE,
}


def pace_kind_for_discipline(discipline: str | None) -> PaceKind | None:
    """Map a questionnaire discipline onto the pace grammar it uses.

    Args:
        discipline: Discipline name (e.g., "Running", "Swimming")

    Returns:
        PaceKind, or None for disciplines without a pace (e.g., "Gym")
    """
    if not discipline:
        return None
    return _DISCIPLINE_PACE_KINDS.get(" ".join(discipline.lower().split()))


def _parse_minutes_seconds(pattern: re.Pattern[str], text: str) -> int | None:
    match = pattern.match(text)
    if not match:
        return None
    total_seconds = int(match.group(1)) * 60 + int(match.group(2))
    return total_seconds if total_seconds > 0 else None


def parse_run_pace(text: str | None) -> RunPace | None:
    if not text:
        return None
    seconds = _parse_minutes_seconds(_RUN_PACE_RE, text)
    return RunPace(seconds_per_km=seconds) if seconds is not None else None


def parse_swim_pace(text: str | None) -> SwimPace | None:
    if not text:
        return None
    seconds = _parse_minutes_seconds(_SWIM_PACE_RE, text)
    return SwimPace(seconds_per_100m=seconds) if seconds is not None else None


def parse_cycling_speed(text: str | None) -> CyclingSpeed | None:
    if not text:
        return None
    match = _CYCLING_SPEED_RE.match(text)
    if not match:
        return None
    kmh = float(match.group(1))
    return CyclingSpeed(kmh=kmh) if kmh > 0 else None


def parse_pace(kind: PaceKind, text: str | None) -> Pace | None:
    """Parse pace text with the grammar of the given kind.

    Args:
        kind: Pace grammar to apply
        text: Raw pace text from the athlete

    Returns:
        Typed pace, or None if the text does not match the grammar
    """
    if kind == PaceKind.RUN:
        return parse_run_pace(text)
    if kind == PaceKind.SWIM:
        return parse_swim_pace(text)
    return parse_cycling_speed(text)
