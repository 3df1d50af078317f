"""Pace module - pace text parsing and pace/duration conversion.

This module provides:
- Typed pace values (run, swim, cycle) parsed once from text
- Race name to kilometre resolution
- Duration from pace, and pace from duration
"""

from hydroplan.pace.converter import duration_from_pace, pace_from_duration
from hydroplan.pace.distances import RACE_DISTANCE_ALIASES, match_race_alias, resolve_distance_km
from hydroplan.pace.parsing import (
    pace_kind_for_discipline,
    parse_cycling_speed,
    parse_pace,
    parse_run_pace,
    parse_swim_pace,
)
from hydroplan.pace.types import CyclingSpeed, Pace, PaceKind, RunPace, SwimPace

__all__ = [
    "RACE_DISTANCE_ALIASES",
    "CyclingSpeed",
    "Pace",
    "PaceKind",
    "RunPace",
    "SwimPace",
    "duration_from_pace",
    "match_race_alias",
    "pace_from_duration",
    "pace_kind_for_discipline",
    "parse_cycling_speed",
    "parse_pace",
    "parse_run_pace",
    "parse_swim_pace",
    "resolve_distance_km",
]
