"""Triathlon race constants - single source of truth.

Segment distances per standard race, and the name aliases that resolve to
each race. Aliases are ordered most specific first (an alias never follows
one it contains, and the 70.3 and 140.6 codes precede bare "ironman");
matching walks them in order.
"""

from dataclasses import dataclass
from enum import StrEnum


class TriathlonRace(StrEnum):
    SPRINT = "sprint"
    OLYMPIC = "olympic"
    HALF = "half"
    FULL = "full"


@dataclass(frozen=True)
class SegmentDistances:
    """Segment distances for one race, all in kilometres."""

    swim_km: float
    bike_km: float
    run_km: float


TRIATHLON_DISTANCES: dict[TriathlonRace, SegmentDistances] = {
    TriathlonRace.SPRINT: SegmentDistances(swim_km=0.75, bike_km=20.0, run_km=5.0),
    TriathlonRace.OLYMPIC: SegmentDistances(swim_km=1.5, bike_km=40.0, run_km=10.0),
    TriathlonRace.HALF: SegmentDistances(swim_km=1.9, bike_km=90.0, run_km=21.1),
    TriathlonRace.FULL: SegmentDistances(swim_km=3.8, bike_km=180.0, run_km=42.2),
}

TRIATHLON_ALIASES: tuple[tuple[str, TriathlonRace], ...] = (
    ("olympic triathlon", TriathlonRace.OLYMPIC),
    ("sprint triathlon", TriathlonRace.SPRINT),
    ("ironman 140.6", TriathlonRace.FULL),
    ("full ironman", TriathlonRace.FULL),
    ("half ironman", TriathlonRace.HALF),
    ("ironman 70.3", TriathlonRace.HALF),
    ("140.6", TriathlonRace.FULL),
    ("70.3", TriathlonRace.HALF),
    ("olympic tri", TriathlonRace.OLYMPIC),
    ("sprint tri", TriathlonRace.SPRINT),
    ("olympic", TriathlonRace.OLYMPIC),
    ("ironman", TriathlonRace.FULL),
    ("sprint", TriathlonRace.SPRINT),
)
