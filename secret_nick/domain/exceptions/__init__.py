"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by the
presentation layer, which maps them to HTTP status codes. Every error carries
a list of FieldError so clients can show which input was rejected.
"""

from secret_nick.domain.exceptions.domain_error import DomainError, FieldError
from secret_nick.domain.exceptions.entity_not_found import EntityNotFoundError
from secret_nick.domain.exceptions.access_denied import AccessDeniedError
from secret_nick.domain.exceptions.validation_error import (
    DomainValidationError,
    DataInconsistencyError,
)
from secret_nick.domain.exceptions.room_update_error import RoomUpdateError

__all__ = [
    "DomainError",
    "FieldError",
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "DataInconsistencyError",
    "RoomUpdateError",
]
