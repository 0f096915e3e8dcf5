"""build_pipeline — construct the nested continuation chain for one activity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..ports.middleware import IMiddleware, NextHandler, TerminalHandler


async def _no_op_terminal(_event: Any) -> None:
    return None


def _bind(
    middleware: IMiddleware,
    event: Any,
    next_handler: NextHandler,
) -> NextHandler:
    async def _continuation() -> None:
        await middleware(event, next_handler)

    return _continuation


def build_pipeline(
    middlewares: Sequence[IMiddleware],
    event: Any,
    terminal_handler: TerminalHandler | None = None,
) -> NextHandler:
    """Build the chain for *event* ending at *terminal_handler*.

    The first middleware in *middlewares* is the **outermost** unit. The chain
    is assembled right-to-left, so every unit only ever sees a continuation
    bound to its own suffix. A fresh chain is built on every call.

    Returns a zero-argument coroutine function; awaiting it runs the chain.
    """
    terminal = _no_op_terminal if terminal_handler is None else terminal_handler

    async def _run_terminal() -> None:
        await terminal(event)

    pipeline: NextHandler = _run_terminal
    for mw in reversed(middlewares):
        pipeline = _bind(mw, event, pipeline)

    return pipeline
