"""
EntityNotFoundError - Raised when a referenced user or room does not exist.
Maps to: HTTP 404 Not Found
"""

from secret_nick.domain.exceptions.domain_error import DomainError


class EntityNotFoundError(DomainError):
    """Exception raised when a requested entity is not found."""

    default_message = "The requested entity was not found."
