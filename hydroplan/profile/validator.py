"""Profile validation and sanitization gate.

Untrusted submissions pass through here before they are stored or handed to
the engine. Free-text fields are sanitized first (trimmed, angle brackets
removed, length capped), then the whole profile is validated against the
AthleteProfile schema. Violations are reported as one aggregated list of
"field: message" strings; nothing is raised for bad input.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from loguru import logger
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from hydroplan.config.settings import settings
from hydroplan.profile.types import AthleteProfile

FREE_TEXT_FIELDS: tuple[str, ...] = (
    "race_distance",
    "avg_pace",
    "swim_pace",
    "bike_speed",
    "bike_power",
    "run_pace",
    "upcoming_event",
    "concerns",
    "diet_type",
)


@dataclass(frozen=True)
class ProfileValidationResult:
    """Outcome of validating one submission.

    Attributes:
        profile: Validated profile, or None when validation failed
        errors: Aggregated "field: message" violations (empty on success)
    """

    profile: AthleteProfile | None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.profile is not None


def sanitize_string(text: str | None, max_length: int | None = None) -> str | None:
    """Strip whitespace and angle brackets, then cap the length.

    Args:
        text: Free text from the athlete
        max_length: Length cap (defaults to settings.free_text_max_length)

    Returns:
        Sanitized text; None and empty strings are returned unchanged
    """
    if not text:
        return text
    limit = max_length if max_length is not None else settings.free_text_max_length
    return text.strip().replace("<", "").replace(">", "")[:limit]


def sanitize_profile_input(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of raw input with every free-text field sanitized."""
    sanitized = dict(raw)
    for name in FREE_TEXT_FIELDS:
        for key in (name, to_camel(name)):
            value = sanitized.get(key)
            if isinstance(value, str):
                sanitized[key] = sanitize_string(value)
    return sanitized


def format_validation_errors(exc: ValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into "field: message" strings."""
    errors: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "profile"
        errors.append(f"{location}: {error['msg']}")
    return errors


def validate_and_sanitize_profile(raw: Any) -> ProfileValidationResult:
    """Sanitize and validate an untrusted profile submission.

    Args:
        raw: Submitted profile mapping (snake_case or camelCase keys)

    Returns:
        ProfileValidationResult with either the profile or all violations
    """
    if not isinstance(raw, Mapping):
        return ProfileValidationResult(profile=None, errors=["profile: Input should be a mapping of profile fields"])

    try:
        profile = AthleteProfile.model_validate(sanitize_profile_input(raw))
    except ValidationError as e:
        errors = format_validation_errors(e)
        logger.info(
            "profile_validator: Submission rejected",
            error_count=len(errors),
            fields=sorted({error.split(":", 1)[0] for error in errors}),
        )
        return ProfileValidationResult(profile=None, errors=errors)

    return ProfileValidationResult(profile=profile)
