"""
DomainError - Base class for errors that carry field-tagged messages.
"""

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class FieldError:
    """A single (field, message) pair. An empty field means the whole request."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class DomainError(Exception):
    """Base class for domain errors."""

    default_message = "Domain error"

    def __init__(
        self,
        message: Optional[str] = None,
        field: str = "",
        errors: Optional[Iterable[FieldError]] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.errors: list[FieldError] = (
            list(errors) if errors else [FieldError(field, message)]
        )

    @property
    def fields(self) -> list[str]:
        return [error.field for error in self.errors]

    def to_detail(self) -> list[dict[str, str]]:
        return [error.to_dict() for error in self.errors]
