"""User-related queries."""

from secret_nick.application.queries.users.list_users import (
    ListUsersQuery,
    ListUsersHandler,
)

__all__ = [
    "ListUsersQuery",
    "ListUsersHandler",
]
