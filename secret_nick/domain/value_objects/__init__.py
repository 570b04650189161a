"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Is compared by value
- Is immutable (frozen dataclass)
- Validates itself on creation
"""

from secret_nick.domain.value_objects.user_id import UserId
from secret_nick.domain.value_objects.room_id import RoomId
from secret_nick.domain.value_objects.user_code import UserCode
from secret_nick.domain.value_objects.wish import Wish

__all__ = [
    "UserId",
    "RoomId",
    "UserCode",
    "Wish",
]
