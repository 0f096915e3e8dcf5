"""ValidatorMiddleware — validates activities before the rest of the chain."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..ports.middleware import IMiddleware
from ..primitives.exceptions import ValidationError

if TYPE_CHECKING:
    from ..ports.middleware import NextHandler
    from ..ports.validation import IValidator


class ValidatorMiddleware(IMiddleware):
    """Runs ``IValidator.validate()`` before the downstream chain.

    If validation fails, raises ValidationError and never awaits the
    continuation.
    """

    def __init__(self, validator: IValidator) -> None:
        self._validator = validator

    async def __call__(
        self,
        event: Any,
        next_handler: NextHandler,
    ) -> None:
        result = await self._validator.validate(event)
        if not result.is_valid:
            raise ValidationError(result.errors)
        await next_handler()
