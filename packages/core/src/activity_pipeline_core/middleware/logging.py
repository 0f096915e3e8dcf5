"""LoggingMiddleware — logs activity handling details."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from ..correlation import extract_correlation_id, get_correlation_id
from ..ports.middleware import IMiddleware

if TYPE_CHECKING:
    from ..ports.middleware import NextHandler

_log = logging.getLogger("activity_pipeline.middleware.logging")


class LoggingMiddleware(IMiddleware):
    """Logs activity handling — type, duration, correlation_id.

    Failures are logged with their traceback and re-raised untouched.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or _log

    async def __call__(
        self,
        event: Any,
        next_handler: NextHandler,
    ) -> None:
        """Log the downstream chain's execution."""
        event_name = type(event).__name__
        correlation_id = extract_correlation_id(event) or get_correlation_id()
        self._log.info(
            "Handling %s (correlation_id=%s)",
            event_name,
            correlation_id,
        )
        start = time.perf_counter()
        try:
            await next_handler()
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            self._log.exception("%s failed after %.2fms", event_name, elapsed)
            raise
        elapsed = (time.perf_counter() - start) * 1000
        self._log.info("%s completed in %.2fms", event_name, elapsed)
