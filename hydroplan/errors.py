"""Error types for hydration planning.

Unparseable pace or race text is not an error (converters return None) and
malformed telemetry is ignored. The types below cover the two cases that must
stop a calculation:
- PlanPreconditionError: the engine was handed a profile it cannot compute
- ProfileValidationError: an untrusted submission failed validation
"""


class PlanPreconditionError(ValueError):
    """Raised when a profile violates an engine precondition.

    Attributes:
        field: Offending profile field (e.g., "session_duration_hours")
        reason: Human-readable description of the violation
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class DurationUnresolvedError(PlanPreconditionError):
    """Raised when no session duration could be supplied or derived."""

    def __init__(self, reason: str) -> None:
        super().__init__("session_duration_hours", reason)


class ProfileValidationError(ValueError):
    """Raised when a profile submission fails validation.

    Attributes:
        errors: Aggregated "field: message" violations, in schema order
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("Validation failed:\n" + "\n".join(errors))
