from activity_pipeline_core.ports.middleware import (
    IMiddleware,
    NextHandler,
    TerminalHandler,
)
from activity_pipeline_core.ports.validation import IValidator

__all__ = [
    "IMiddleware",
    "IValidator",
    "NextHandler",
    "TerminalHandler",
]
