"""
User Entity - A participant of a gift exchange room.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from secret_nick.domain.value_objects.room_id import RoomId
from secret_nick.domain.value_objects.user_code import UserCode
from secret_nick.domain.value_objects.user_id import UserId
from secret_nick.domain.value_objects.wish import Wish


@dataclass
class User:
    # Required fields (no defaults) - must come first
    id: UserId
    user_code: UserCode
    first_name: str
    last_name: str
    # Optional fields (with defaults) - must come last
    is_admin: bool = False
    room_id: Optional[RoomId] = None
    phone: str = ""
    email: Optional[str] = None
    delivery_info: str = ""
    gift_to_user_id: Optional[UserId] = None
    wishes: list[Wish] = field(default_factory=list)
    created_on: Optional[datetime] = None
    modified_on: Optional[datetime] = None

    def belongs_to(self, room_id: Optional[RoomId]) -> bool:
        return self.room_id is not None and self.room_id == room_id
