# core/errors.py
"""Exception hierarchy for lesson plan generation."""

from __future__ import annotations


class LessonPlanError(Exception):
    """Base class for all lesson generation failures."""


class InputValidationError(LessonPlanError):
    """Raised when the caller supplies an empty topic or subject."""


class MissingCredentialError(LessonPlanError):
    """Raised when no API key is available for the generation endpoint."""


class GenerationAttemptError(LessonPlanError):
    """A single failed attempt. Handled inside the retry loop."""

    failure_kind = "unknown"


class TransportError(GenerationAttemptError):
    """Non-success HTTP status or network-level failure."""

    failure_kind = "transport"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EnvelopeShapeError(GenerationAttemptError):
    """Response lacks the candidates[0].content.parts[0].text path."""

    failure_kind = "envelope"


class DecodeError(GenerationAttemptError):
    """Embedded text is not a valid lesson plan."""

    failure_kind = "decode"


class ExhaustedRetriesError(LessonPlanError):
    """All attempts failed; wraps the last attempt error."""

    def __init__(self, attempts: int, last_error: GenerationAttemptError) -> None:
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"Lesson plan generation failed after {attempts} attempt(s). "
            f"Last error ({last_error.failure_kind}): {last_error}"
        )

    @property
    def last_failure_kind(self) -> str:
        return self.last_error.failure_kind
