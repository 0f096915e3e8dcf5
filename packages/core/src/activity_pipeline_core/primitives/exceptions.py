"""Exceptions raised by activity-pipeline-core itself.

Failures raised by middleware units are never wrapped: they reach the caller
of ``dispatch`` exactly as the unit raised them.
"""

from __future__ import annotations


class ActivityPipelineError(Exception):
    """Root exception for the activity pipeline toolkit."""


class MiddlewareRegistrationError(ActivityPipelineError, TypeError):
    """Raised when something that cannot act as a middleware unit is registered."""

    def __init__(self, unit: object) -> None:
        self.unit = unit
        super().__init__(
            f"{type(unit).__name__} is not callable and cannot be used as middleware"
        )


class ValidationError(ActivityPipelineError):
    """Raised when an activity fails validation.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))
