"""Middleware components."""

from .anonymous import AnonymousMiddleware
from .logging import LoggingMiddleware
from .middleware_set import MiddlewareSet
from .pipeline import build_pipeline
from .validation import ValidatorMiddleware

__all__ = [
    "AnonymousMiddleware",
    "LoggingMiddleware",
    "MiddlewareSet",
    "ValidatorMiddleware",
    "build_pipeline",
]
