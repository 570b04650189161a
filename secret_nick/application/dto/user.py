"""User DTOs for API responses."""

from __future__ import annotations

from pydantic import BaseModel
from typing import Optional

from secret_nick.domain.entities.user import User


class UserDTO(BaseModel):
    """Participant as shown in the room's participant list."""

    id: int
    first_name: str
    last_name: str
    is_admin: bool
    room_id: Optional[int] = None
    gift_to_user_id: Optional[int] = None

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(
            id=user.id.value,
            first_name=user.first_name,
            last_name=user.last_name,
            is_admin=user.is_admin,
            room_id=user.room_id.value if user.room_id else None,
            gift_to_user_id=user.gift_to_user_id.value if user.gift_to_user_id else None,
        )
