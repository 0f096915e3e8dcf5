"""activity-pipeline-core — in-process Russian-doll middleware pipeline.

Units registered on a :class:`MiddlewareSet` wrap each other in registration
order around an optional terminal handler.
"""

from __future__ import annotations

from .correlation import (
    CorrelationIdPropagator,
    extract_correlation_id,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)

# ── Middleware ───────────────────────────────────────────────────
from .middleware import (
    AnonymousMiddleware,
    LoggingMiddleware,
    MiddlewareSet,
    ValidatorMiddleware,
    build_pipeline,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import IMiddleware, IValidator, NextHandler, TerminalHandler

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    ActivityPipelineError,
    MiddlewareRegistrationError,
    ValidationError,
)

# ── Validation ──────────────────────────────────────────────────
from .validation import PydanticValidator, ValidationResult

__all__: list[str] = [
    # Middleware
    "AnonymousMiddleware",
    "LoggingMiddleware",
    "MiddlewareSet",
    "ValidatorMiddleware",
    "build_pipeline",
    "CorrelationIdPropagator",
    "extract_correlation_id",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
    # Ports
    "IMiddleware",
    "IValidator",
    "NextHandler",
    "TerminalHandler",
    # Validation
    "PydanticValidator",
    "ValidationResult",
    # Primitives
    "ActivityPipelineError",
    "MiddlewareRegistrationError",
    "ValidationError",
]
