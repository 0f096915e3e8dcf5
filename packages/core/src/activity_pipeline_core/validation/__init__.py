"""Activity validation."""

from .pydantic import PydanticValidator
from .result import ValidationResult

__all__ = ["PydanticValidator", "ValidationResult"]
