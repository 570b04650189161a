"""
AccessDeniedError - Raised when the caller may not perform the action.
Maps to: HTTP 403 Forbidden
"""

from secret_nick.domain.exceptions.domain_error import DomainError


class AccessDeniedError(DomainError):
    """Raised when user lacks permission to act on a resource"""

    default_message = "Access denied"
