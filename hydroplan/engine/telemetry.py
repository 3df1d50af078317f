"""Wearable telemetry handling for the plan engine.

Telemetry is opaque to the engine: its presence only marks the plan as
enhanced. Absent or malformed telemetry never fails a calculation and never
changes a number.
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger


def is_telemetry_usable(telemetry: Any) -> bool:
    """Check whether telemetry was supplied in a usable shape.

    Args:
        telemetry: Wearable-derived data blob, or None

    Returns:
        True for a non-empty mapping, False otherwise
    """
    if telemetry is None:
        return False
    if not isinstance(telemetry, Mapping):
        logger.warning(
            "hydration_engine: Ignoring malformed telemetry",
            telemetry_type=type(telemetry).__name__,
        )
        return False
    return len(telemetry) > 0
