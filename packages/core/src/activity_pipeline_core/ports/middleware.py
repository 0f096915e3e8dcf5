"""IMiddleware — Russian-doll middleware protocol."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, runtime_checkable

NextHandler = Callable[[], Awaitable[None]]
"""Zero-argument continuation: the rest of the chain, terminal included."""

TerminalHandler = Callable[[Any], Awaitable[None]]
"""Final action, run only when every unit awaited its continuation."""


@runtime_checkable
class IMiddleware(Protocol):
    """Protocol for a unit in the activity pipeline.

    A unit receives the activity and a continuation bound to the remainder of
    the chain. It may run code before and after awaiting the continuation,
    skip it entirely (short-circuit), or raise.
    Units run in **registration order** (first registered = outermost).
    """

    async def __call__(
        self,
        event: Any,
        next_handler: NextHandler,
    ) -> None:
        """Process *event* and await *next_handler* to proceed.

        Parameters
        ----------
        event:
            The inbound activity. Opaque to the engine; may be ``None``.
        next_handler:
            Zero-argument coroutine function running every downstream unit
            and the terminal handler. Awaiting it more than once re-runs the
            downstream chain each time.
        """
        ...
