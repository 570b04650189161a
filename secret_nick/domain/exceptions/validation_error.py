"""
DomainValidationError - Raised when a request is authorized but invalid in the
current state (self-deletion, closed room, failed persistence).
Maps to: HTTP 400 Bad Request
"""

from secret_nick.domain.exceptions.domain_error import DomainError


class DomainValidationError(DomainError):
    """Exception raised for domain validation errors."""

    default_message = "Invalid request"


class DataInconsistencyError(DomainValidationError):
    """
    A user is recorded in a room but missing from the room's loaded members.

    Reported to the client as a bad request, but it points at a loader or
    cache defect and is logged as such by the presentation layer.
    """

    default_message = (
        "Data inconsistency detected. User exists in room but not loaded properly."
    )
