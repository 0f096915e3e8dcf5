"""AnonymousMiddleware — adapts a bare coroutine function to IMiddleware."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..ports.middleware import IMiddleware
from ..primitives.exceptions import MiddlewareRegistrationError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from ..ports.middleware import NextHandler


class AnonymousMiddleware(IMiddleware):
    """Wraps ``async def handler(event, next_handler)`` as a middleware unit.

    Usage::

        async def stamp(event, next_handler):
            event.stamped = True
            await next_handler()

        middleware_set.use(AnonymousMiddleware(stamp))
    """

    def __init__(
        self,
        handler: Callable[[Any, NextHandler], Awaitable[None]],
    ) -> None:
        if not callable(handler):
            raise MiddlewareRegistrationError(handler)
        self._handler = handler

    @property
    def name(self) -> str:
        return getattr(self._handler, "__qualname__", type(self._handler).__name__)

    async def __call__(
        self,
        event: Any,
        next_handler: NextHandler,
    ) -> None:
        await self._handler(event, next_handler)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"
