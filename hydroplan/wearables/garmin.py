"""Garmin export summary -> partial athlete profile.

Input is the already-parsed content of a Garmin Connect report export
(monthly activity counts and times, daily heart rate, pace and fitness age).
Reading the export files themselves happens outside this package.
"""

from collections import defaultdict

from loguru import logger
from pydantic import BaseModel, Field

from hydroplan.utils.rounding import round_half_up, round_half_up_to

RECENT_PERIODS = 3

# Resting HR is estimated as this many bpm below the mean exercise HR
RESTING_HR_OFFSET_BPM = 33

# Estimates outside the profile schema bounds are dropped, not clamped
RESTING_HR_RANGE_BPM = (30, 120)

GARMIN_DISCIPLINES: dict[str, str] = {
    "Running": "Running",
    "Trail Running": "Running",
    "Cycling": "Cycling",
    "Water Sports": "Swimming",
    "Gym & Fitness Equipment": "Gym",
}

IGNORED_ACTIVITY_TYPES = {"Other"}


class MonthlyActivityValue(BaseModel):
    month: str
    activity_type: str
    value: float = 0


class DailyValue(BaseModel):
    date: str
    value: float = 0


class PaceValue(BaseModel):
    date: str
    value: float = 0
    pace: str = ""


class GarminSummary(BaseModel):
    """Parsed Garmin report series, oldest entry first."""

    activities: list[MonthlyActivityValue] = Field(default_factory=list)
    total_activity_time: list[MonthlyActivityValue] = Field(default_factory=list)
    average_heart_rate: list[DailyValue] = Field(default_factory=list)
    average_pace: list[PaceValue] = Field(default_factory=list)
    fitness_age: list[DailyValue] = Field(default_factory=list)


def _primary_activity_type(activities: list[MonthlyActivityValue]) -> str | None:
    counts: dict[str, float] = defaultdict(float)
    for activity in activities:
        if activity.activity_type and activity.activity_type not in IGNORED_ACTIVITY_TYPES:
            counts[activity.activity_type] += activity.value
    if not counts:
        return None
    # sorted() is stable: ties keep first-seen order
    return sorted(counts.items(), key=lambda item: -item[1])[0][0]


def _average_session_hours(summary: GarminSummary, activity_type: str) -> float | None:
    recent_minutes = [t.value for t in summary.total_activity_time if t.activity_type == activity_type][-RECENT_PERIODS:]
    recent_counts = [a.value for a in summary.activities if a.activity_type == activity_type][-RECENT_PERIODS:]
    if not recent_minutes or not recent_counts:
        return None

    total_activities = sum(recent_counts)
    if total_activities <= 0:
        return None
    return round_half_up_to(sum(recent_minutes) / total_activities / 60, 1)


def map_garmin_summary(summary: GarminSummary) -> dict:
    """Derive partial profile fields from a Garmin summary.

    Args:
        summary: Parsed Garmin report series

    Returns:
        Partial profile dict (snake_case keys); series that are missing
        leave their keys absent
    """
    profile: dict = {}

    activity_type = _primary_activity_type(summary.activities)
    if activity_type is not None:
        profile["disciplines"] = [GARMIN_DISCIPLINES.get(activity_type, activity_type)]

        hours = _average_session_hours(summary, activity_type)
        if hours is not None and hours > 0:
            profile["session_duration_hours"] = hours

    if summary.average_heart_rate:
        recent_hr = [hr.value for hr in summary.average_heart_rate[-RECENT_PERIODS:]]
        resting_hr = round_half_up(sum(recent_hr) / len(recent_hr) - RESTING_HR_OFFSET_BPM)
        if RESTING_HR_RANGE_BPM[0] <= resting_hr <= RESTING_HR_RANGE_BPM[1]:
            profile["resting_heart_rate"] = resting_hr
        else:
            logger.debug(
                "garmin_mapper: Dropping out-of-range resting HR estimate",
                resting_hr_estimate=resting_hr,
            )

    if summary.average_pace and summary.average_pace[-1].pace:
        profile["avg_pace"] = summary.average_pace[-1].pace

    if summary.fitness_age:
        profile["age"] = round_half_up(summary.fitness_age[-1].value)

    return profile
