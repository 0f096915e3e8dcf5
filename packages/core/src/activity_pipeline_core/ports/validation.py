"""IValidator — activity validation protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..validation.result import ValidationResult


@runtime_checkable
class IValidator(Protocol):
    """Protocol for activity validators used by
    :class:`~activity_pipeline_core.middleware.validation.ValidatorMiddleware`.
    """

    async def validate(self, event: Any) -> ValidationResult:
        """Validate *event* and return a
        :class:`~activity_pipeline_core.validation.result.ValidationResult`.
        """
        ...
