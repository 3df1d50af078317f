"""Wearable summary mapping."""

from hydroplan.wearables.garmin import (
    DailyValue,
    GarminSummary,
    MonthlyActivityValue,
    PaceValue,
    map_garmin_summary,
)

__all__ = [
    "DailyValue",
    "GarminSummary",
    "MonthlyActivityValue",
    "PaceValue",
    "map_garmin_summary",
]
