"""Triathlon segment calculator."""

from hydroplan.triathlon.calculator import (
    SegmentBreakdown,
    TriathlonBreakdown,
    compute_total_duration,
    get_breakdown,
    resolve_race_type,
)
from hydroplan.triathlon.constants import (
    TRIATHLON_ALIASES,
    TRIATHLON_DISTANCES,
    SegmentDistances,
    TriathlonRace,
)

__all__ = [
    "TRIATHLON_ALIASES",
    "TRIATHLON_DISTANCES",
    "SegmentBreakdown",
    "SegmentDistances",
    "TriathlonBreakdown",
    "TriathlonRace",
    "compute_total_duration",
    "get_breakdown",
    "resolve_race_type",
]
