"""
Room Entity - One gift exchange session and its loaded members.

The room is the aggregate root for membership: members are detached only
through remove_user, which enforces the closed-room freeze.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from secret_nick.domain.entities.user import User
from secret_nick.domain.exceptions import DomainValidationError
from secret_nick.domain.value_objects.room_id import RoomId
from secret_nick.domain.value_objects.user_id import UserId


@dataclass
class Room:
    id: RoomId
    name: str
    invitation_code: str
    description: str = ""
    gift_exchange_date: Optional[datetime] = None
    gift_maximum_budget: Optional[Decimal] = None
    admin_id: Optional[UserId] = None
    closed_on: Optional[datetime] = None
    created_on: Optional[datetime] = None
    modified_on: Optional[datetime] = None
    users: list[User] = field(default_factory=list)

    @property
    def is_closed(self) -> bool:
        return self.closed_on is not None

    @property
    def user_ids(self) -> list[UserId]:
        return [user.id for user in self.users]

    def find_user(self, user_id: UserId) -> Optional[User]:
        return next((user for user in self.users if user.id == user_id), None)

    def remove_user(self, user_id: UserId) -> None:
        """
        Detach a member from the room.

        Removing an id that is not a member is a no-op.

        Raises:
            DomainValidationError: If the room is already closed
        """
        if self.is_closed:
            raise DomainValidationError(
                "Room is already closed.", field="room.ClosedOn"
            )

        self.users[:] = [user for user in self.users if user.id != user_id]
