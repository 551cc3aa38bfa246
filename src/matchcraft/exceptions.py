"""Typed failures raised by the tailoring pipeline.

Every error carries a ``user_action`` so callers can decide between asking the
user to fix their input, offering a retry, or logging and alerting.
"""

from __future__ import annotations

FIX_INPUT = "fix_input"
RETRY = "retry"
ALERT = "alert"


class TailoringError(Exception):
    """Base class for all pipeline failures."""

    kind = "tailoring_error"
    user_action = ALERT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message, "user_action": self.user_action}


class ValidationError(TailoringError):
    """Resume text or job description is missing or blank."""

    kind = "validation_error"
    user_action = FIX_INPUT

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class AnalysisFailure(TailoringError):
    """A non-generative stage raised unexpectedly."""

    kind = "analysis_failure"


class ProviderError(TailoringError):
    """The text-generation provider reported an error."""

    kind = "provider_error"
    retryable = False


class TransientProviderError(ProviderError):
    """Timeouts, rate limits, connection drops and 5xx responses."""

    kind = "transient_provider_error"
    user_action = RETRY
    retryable = True


class PermanentProviderError(ProviderError):
    """Malformed request, bad credentials, unknown model."""

    kind = "permanent_provider_error"


class SynthesisFailure(TailoringError):
    """A document could not be generated or failed structural validation."""

    kind = "synthesis_failure"

    def __init__(self, message: str, *, document: str | None = None, retryable: bool = True):
        super().__init__(message)
        self.document = document
        self.retryable = retryable

    @property
    def user_action(self) -> str:  # type: ignore[override]
        return RETRY if self.retryable else ALERT
