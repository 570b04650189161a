"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from secret_nick.domain.entities.user import User
from secret_nick.domain.entities.room import Room

__all__ = [
    "User",
    "Room",
]
