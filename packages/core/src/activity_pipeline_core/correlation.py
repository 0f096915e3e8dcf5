"""Correlation ID management for activities flowing through a pipeline."""

from __future__ import annotations

import uuid
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from .ports.middleware import IMiddleware

if TYPE_CHECKING:
    from .ports.middleware import NextHandler

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> str | None:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None) -> None:
    """Set correlation ID in context."""
    _correlation_id.set(correlation_id)


def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())


def extract_correlation_id(event: Any, key: str = "correlation_id") -> str | None:
    """Read the correlation ID carried by *event*, attribute or mapping key."""
    if isinstance(event, dict):
        value = event.get(key)
    else:
        value = getattr(event, key, None)
    return None if value is None else str(value)


class CorrelationIdPropagator(IMiddleware):
    """Scopes the activity's correlation ID to the downstream chain.

    The ID is read from the activity attribute (or mapping key) named
    *correlation_id_key*. When the activity has none, the ID already in
    context is kept, or a new one is generated if *generate* is set.
    The previous context value is restored once the continuation returns or
    raises.
    """

    def __init__(
        self,
        correlation_id_key: str = "correlation_id",
        *,
        generate: bool = False,
    ) -> None:
        self._key = correlation_id_key
        self._generate = generate

    async def __call__(
        self,
        event: Any,
        next_handler: NextHandler,
    ) -> None:
        cid = extract_correlation_id(event, self._key) or get_correlation_id()
        if cid is None and self._generate:
            cid = generate_correlation_id()

        token = _correlation_id.set(cid)
        try:
            await next_handler()
        finally:
            _correlation_id.reset(token)
