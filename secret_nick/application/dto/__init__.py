"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- user.py -> UserDTO
- room.py -> RoomDTO

Note: These are different from domain entities.
DTOs are for API output, entities are for business logic.
"""

from secret_nick.application.dto.user import UserDTO
from secret_nick.application.dto.room import RoomDTO

__all__ = [
    "UserDTO",
    "RoomDTO",
]
