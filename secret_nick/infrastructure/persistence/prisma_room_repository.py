"""
Prisma Room Repository Implementation.

- Implements RoomRepository port from domain layer
- get_by_user_code loads the room together with all of its members
- update persists membership only: stored members missing from room.users
  are detached (room_id set to NULL), never deleted
- Prisma errors surface as RoomUpdateError; nothing is retried here
"""

from __future__ import annotations

from datetime import datetime, timezone
from logging import getLogger
from typing import Optional, TYPE_CHECKING

from prisma.errors import PrismaError

from secret_nick.domain.entities.room import Room
from secret_nick.domain.exceptions import RoomUpdateError
from secret_nick.domain.ports.repositories import RoomRepository
from secret_nick.domain.value_objects.user_code import UserCode
from secret_nick.infrastructure.persistence.record_mapper import to_room

if TYPE_CHECKING:
    from prisma import Prisma

logger = getLogger(__name__)


class PrismaRoomRepository(RoomRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def get_by_user_code(self, user_code: UserCode) -> Optional[Room]:
        """Get the room that has a member with this code."""
        record = await self._prisma.room.find_first(
            where={"users": {"some": {"user_code": user_code.value}}},
            include={"users": True},
        )
        return to_room(record) if record else None

    async def update(self, room: Room) -> None:
        """Detach stored members that are no longer in room.users."""
        member_ids = [user_id.value for user_id in room.user_ids]
        try:
            async with self._prisma.tx() as transaction:
                await transaction.user.update_many(
                    where={"room_id": room.id.value, "id": {"not_in": member_ids}},
                    data={"room_id": None},
                )
                await transaction.room.update(
                    where={"id": room.id.value},
                    data={"modified_on": datetime.now(timezone.utc)},
                )
        except PrismaError as e:
            logger.error(f"Prisma update of room {room.id} failed: {e}")
            raise RoomUpdateError(f"Failed to update room {room.id}.") from e
