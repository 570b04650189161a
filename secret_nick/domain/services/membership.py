"""
Membership rules used when an administrator removes a participant.
"""

from enum import Enum
from typing import Optional

from secret_nick.domain.entities.user import User
from secret_nick.domain.exceptions import (
    AccessDeniedError,
    DataInconsistencyError,
    DomainError,
    DomainValidationError,
    EntityNotFoundError,
)
from secret_nick.domain.value_objects.user_id import UserId


class MissingMemberReason(str, Enum):
    """Why a target id is absent from the loaded members of the caller's room."""

    NOT_FOUND = "not_found"
    OTHER_ROOM = "other_room"
    INCONSISTENT = "inconsistent"

    def to_error(self) -> DomainError:
        if self is MissingMemberReason.NOT_FOUND:
            return EntityNotFoundError(
                "User with the specified Id was not found.", field="id"
            )
        if self is MissingMemberReason.OTHER_ROOM:
            return AccessDeniedError(
                "User with userCode and user with Id belong to different rooms.",
                field="id",
            )
        return DataInconsistencyError(field="id")


def ensure_admin(caller: User) -> None:
    if not caller.is_admin:
        raise AccessDeniedError("User is not an administrator.", field="userCode")


def ensure_not_self(caller: User, target_id: UserId) -> None:
    if caller.id == target_id:
        raise DomainValidationError(
            "Administrator cannot delete themselves.", field="id"
        )


def classify_missing_member(
    caller: User, target: Optional[User]
) -> MissingMemberReason:
    """
    Classify a target that was not among the loaded members of the caller's room.

    Args:
        caller: Resolved administrator
        target: Target looked up directly by id, or None if it does not exist

    Returns:
        NOT_FOUND when the id does not exist, OTHER_ROOM when it belongs to a
        different room, INCONSISTENT when it belongs to the caller's room yet
        was not loaded with it
    """
    if target is None:
        return MissingMemberReason.NOT_FOUND
    if not target.belongs_to(caller.room_id):
        return MissingMemberReason.OTHER_ROOM
    return MissingMemberReason.INCONSISTENT
