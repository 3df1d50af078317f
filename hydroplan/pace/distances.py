"""Race distance resolution.

Canonical race names map to fixed kilometre values. Matching is a
case-insensitive substring search over whole tokens, walking an explicitly
ordered table with the most specific alias first so that "Half Marathon" is
never captured by "Marathon" and "70.3 Ironman" never by "Ironman".
"""

import math
import re

from loguru import logger

from hydroplan.config.settings import settings

# Ordered most specific first: an alias never follows one it contains, and the
# 70.3 and 140.6 codes precede bare "ironman". Triathlon entries resolve to the run leg.
RACE_DISTANCE_ALIASES: tuple[tuple[str, float], ...] = (
    ("olympic triathlon", 10.0),
    ("sprint triathlon", 5.0),
    ("half marathon", 21.0975),
    ("ironman 140.6", 42.195),
    ("full ironman", 42.195),
    ("ironman 70.3", 21.0975),
    ("half ironman", 21.0975),
    ("140.6", 42.195),
    ("70.3", 21.0975),
    ("marathon", 42.195),
    ("ironman", 42.195),
    ("100 km", 100.0),
    ("10 km", 10.0),
    ("15 km", 15.0),
    ("50 km", 50.0),
    ("5 km", 5.0),
)

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
_KM_SPACING_RE = re.compile(r"(\d)\s*km\b")

_ALIAS_PATTERNS: tuple[tuple[re.Pattern[str], str, float], ...] = tuple(
    (re.compile(rf"(?<![\w.]){re.escape(alias)}(?![\w.])"), alias, km) for alias, km in RACE_DISTANCE_ALIASES
)


def _normalize(text: str) -> str:
    collapsed = " ".join(text.lower().replace("-", " ").split())
    return _KM_SPACING_RE.sub(r"\1 km", collapsed)


def match_race_alias(text: str) -> float | None:
    """Look up a canonical race name inside free text.

    Args:
        text: Race description (e.g., "Berlin Half Marathon")

    Returns:
        Distance in km, or None if no alias matches
    """
    normalized = _normalize(text)
    for pattern, _alias, km in _ALIAS_PATTERNS:
        if pattern.search(normalized):
            return km
    return None


def resolve_distance_km(distance: float | int | str | None) -> float | None:
    """Resolve a race distance to kilometres.

    Numbers are taken as kilometres. Text is matched against the alias table;
    unrecognised text falls back to its first number, and text without any
    number falls back to the configured default distance.

    Args:
        distance: Kilometres, race name, or free text

    Returns:
        Distance in km, or None when the distance is missing or non-positive
    """
    if distance is None or isinstance(distance, bool):
        return None

    if isinstance(distance, (int, float)):
        km = float(distance)
        return km if math.isfinite(km) and km > 0 else None

    if not distance.strip():
        return None

    alias_km = match_race_alias(distance)
    if alias_km is not None:
        return alias_km

    number = _NUMBER_RE.search(distance)
    if number:
        km = float(number.group(0))
        return km if math.isfinite(km) and km > 0 else None

    logger.debug(
        "distance_resolver: No distance found in text, using default",
        distance_text=distance,
        default_km=settings.default_race_distance_km,
    )
    return settings.default_race_distance_km
