"""
Prisma User Repository Implementation.

- Implements UserReadOnlyRepository port from domain layer
- include_room / include_wishes are passed straight to Prisma's include
- Returns None when no record matches
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from secret_nick.domain.entities.user import User
from secret_nick.domain.ports.repositories import UserReadOnlyRepository
from secret_nick.domain.value_objects.room_id import RoomId
from secret_nick.domain.value_objects.user_code import UserCode
from secret_nick.domain.value_objects.user_id import UserId
from secret_nick.infrastructure.persistence.record_mapper import to_user

if TYPE_CHECKING:
    from prisma import Prisma


class PrismaUserRepository(UserReadOnlyRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def get_by_code(
        self,
        user_code: UserCode,
        include_room: bool = False,
        include_wishes: bool = False,
    ) -> Optional[User]:
        """Get user by access code."""
        record = await self._prisma.user.find_unique(
            where={"user_code": user_code.value},
            include={"room": include_room, "wishes": include_wishes},
        )
        return to_user(record) if record else None

    async def get_by_id(
        self,
        user_id: UserId,
        include_room: bool = False,
        include_wishes: bool = False,
    ) -> Optional[User]:
        """Get user by ID."""
        record = await self._prisma.user.find_unique(
            where={"id": user_id.value},
            include={"room": include_room, "wishes": include_wishes},
        )
        return to_user(record) if record else None

    async def get_by_room(self, room_id: RoomId) -> list[User]:
        """Get all members of a room, ordered by id."""
        records = await self._prisma.user.find_many(
            where={"room_id": room_id.value},
            order={"id": "asc"},
        )
        return [to_user(record) for record in records]
