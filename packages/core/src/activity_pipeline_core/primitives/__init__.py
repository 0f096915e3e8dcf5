"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    ActivityPipelineError,
    MiddlewareRegistrationError,
    ValidationError,
)

__all__ = [
    "ActivityPipelineError",
    "MiddlewareRegistrationError",
    "ValidationError",
]
