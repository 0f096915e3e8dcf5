"""MiddlewareSet — ordered registry and dispatcher for the activity pipeline."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..ports.middleware import IMiddleware
from ..primitives.exceptions import MiddlewareRegistrationError
from .anonymous import AnonymousMiddleware
from .pipeline import build_pipeline

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from ..ports.middleware import NextHandler, TerminalHandler

logger = logging.getLogger("activity_pipeline.middleware")


class MiddlewareSet(IMiddleware):
    """Append-only, ordered collection of middleware units.

    Registration order is invocation order: the first unit passed to
    :meth:`use` is the outermost layer of every chain. There is no removal,
    no reordering and no priority.

    Configure the set first, then dispatch. Concurrent dispatches over a fully
    configured set are independent; registering while a dispatch is in flight
    only affects later dispatches, since each chain is built from a snapshot.

    A unit that awaits its continuation more than once re-runs the downstream
    chain (and the terminal handler) each time. This is not guarded.

    A ``MiddlewareSet`` is itself a unit, so sets can be nested::

        inner = MiddlewareSet()
        inner.use(AuthMiddleware())
        outer = MiddlewareSet()
        outer.use(LoggingMiddleware())
        outer.use(inner)
    """

    def __init__(self) -> None:
        self._middlewares: list[IMiddleware] = []

    # ── Registration ─────────────────────────────────────────────

    def use(self, middleware: IMiddleware) -> None:
        """Append *middleware* to the end of the chain.

        Duplicates are allowed; registering the same unit twice runs it twice.
        """
        if not callable(middleware):
            raise MiddlewareRegistrationError(middleware)
        self._middlewares.append(middleware)
        logger.debug(
            "Registered middleware %r at position %d",
            middleware,
            len(self._middlewares) - 1,
        )

    def add(
        self,
        handler: Callable[[Any, NextHandler], Awaitable[None]],
    ) -> Callable[[Any, NextHandler], Awaitable[None]]:
        """Decorator-style registration of a bare coroutine function.

        Usage::

            @middleware_set.add
            async def audit(event, next_handler):
                await next_handler()
        """
        self.use(AnonymousMiddleware(handler))
        return handler

    # ── Introspection ────────────────────────────────────────────

    @property
    def middlewares(self) -> tuple[IMiddleware, ...]:
        """Registered units, in invocation order."""
        return tuple(self._middlewares)

    def __len__(self) -> int:
        return len(self._middlewares)

    # ── Dispatch ─────────────────────────────────────────────────

    async def dispatch(self, event: Any = None) -> None:
        """Run *event* through every unit, ending at a no-op terminal.

        Any failure that no unit intercepts propagates unchanged.
        """
        chain = build_pipeline(tuple(self._middlewares), event)
        await chain()

    async def dispatch_with_status(
        self,
        event: Any,
        terminal_handler: TerminalHandler | None = None,
    ) -> bool:
        """Run *event* through every unit, ending at *terminal_handler*.

        Returns ``True`` if the terminal handler was invoked, ``False`` if a
        unit short-circuited by not awaiting its continuation. A failure that
        escapes the chain propagates and no status is returned.
        """
        reached = False

        async def _terminal(terminal_event: Any) -> None:
            nonlocal reached
            reached = True
            if terminal_handler is not None:
                await terminal_handler(terminal_event)

        chain = build_pipeline(tuple(self._middlewares), event, _terminal)
        await chain()

        if not reached:
            logger.debug(
                "Pipeline for %s short-circuited before the terminal handler",
                type(event).__name__,
            )
        return reached

    async def __call__(
        self,
        event: Any,
        next_handler: NextHandler,
    ) -> None:
        """Run this set as a single unit inside an enclosing chain.

        The enclosing continuation is awaited only if every unit of this set
        awaited its own continuation.
        """

        async def _continue(_event: Any) -> None:
            await next_handler()

        await self.dispatch_with_status(event, _continue)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._middlewares)} middlewares)"
