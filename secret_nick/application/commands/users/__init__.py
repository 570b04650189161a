"""User commands."""

from .delete_user import DeleteUserCommand, DeleteUserHandler

__all__ = [
    "DeleteUserCommand",
    "DeleteUserHandler",
]
