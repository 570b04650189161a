"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines the methods the application layer needs
- Does NOT specify implementation (Prisma, Redis, in-memory)
"""

from secret_nick.domain.ports.repositories.user_repository import (
    UserReadOnlyRepository,
)
from secret_nick.domain.ports.repositories.room_repository import (
    RoomReadOnlyRepository,
    RoomRepository,
)

__all__ = [
    "UserReadOnlyRepository",
    "RoomReadOnlyRepository",
    "RoomRepository",
]
