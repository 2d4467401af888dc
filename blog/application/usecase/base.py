"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from blog.domain.error import ValidationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_uuid(value: str, field: str) -> UUID:
    """Parse an identifier from a request, reporting bad input on ``field``."""
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise ValidationError(field, f"Invalid identifier: {value!r}")
