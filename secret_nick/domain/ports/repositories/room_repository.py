"""
Room Repository Ports - Interfaces for room persistence.
Implementation: secret_nick/infrastructure/persistence/prisma_room_repository.py

RoomReadOnlyRepository may be served from a cache. RoomRepository is what
commands load and mutate, so its reads must reflect the current store state
(closed_on is set outside this service).
"""

from abc import ABC, abstractmethod
from typing import Optional

from secret_nick.domain.entities.room import Room
from secret_nick.domain.value_objects.user_code import UserCode


class RoomReadOnlyRepository(ABC):
    @abstractmethod
    async def get_by_user_code(self, user_code: UserCode) -> Optional[Room]:
        """Load the room of the member with this code, members included."""
        ...


class RoomRepository(RoomReadOnlyRepository):
    @abstractmethod
    async def update(self, room: Room) -> None:
        """
        Persist the room's membership.

        Raises:
            RoomUpdateError: If the store rejects the update
        """
        ...
