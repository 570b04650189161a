"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from secret_nick.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)
from secret_nick.infrastructure.persistence.prisma_room_repository import (
    PrismaRoomRepository,
)

__all__ = [
    "PrismaUserRepository",
    "PrismaRoomRepository",
]
