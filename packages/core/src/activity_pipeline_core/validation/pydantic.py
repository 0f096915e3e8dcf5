"""PydanticValidator — validates activities with Pydantic models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .result import ValidationResult


class PydanticValidator:
    """Validates activities through Pydantic.

    With a *model*, every activity (a mapping or another model) is validated
    against it. Without one, Pydantic model activities are re-validated
    through their own class and anything else passes.
    """

    def __init__(self, model: type[BaseModel] | None = None) -> None:
        self._model = model

    async def validate(self, event: Any) -> ValidationResult:
        model = self._model
        if model is None:
            if not isinstance(event, BaseModel):
                return ValidationResult.success()
            model = type(event)

        data = event.model_dump() if isinstance(event, BaseModel) else event
        try:
            model.model_validate(data)
        except PydanticValidationError as exc:
            return ValidationResult.failure(_collect_errors(exc))
        return ValidationResult.success()


def _collect_errors(exc: PydanticValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
        errors.setdefault(loc, []).append(error.get("msg", "validation error"))
    return errors
