"""
User Repository Port - Read-only interface for participant lookups.
Implementation: secret_nick/infrastructure/persistence/prisma_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from secret_nick.domain.entities.user import User
from secret_nick.domain.value_objects.room_id import RoomId
from secret_nick.domain.value_objects.user_code import UserCode
from secret_nick.domain.value_objects.user_id import UserId


class UserReadOnlyRepository(ABC):
    @abstractmethod
    async def get_by_code(
        self,
        user_code: UserCode,
        include_room: bool = False,
        include_wishes: bool = False,
    ) -> Optional[User]: ...

    @abstractmethod
    async def get_by_id(
        self,
        user_id: UserId,
        include_room: bool = False,
        include_wishes: bool = False,
    ) -> Optional[User]: ...

    @abstractmethod
    async def get_by_room(self, room_id: RoomId) -> list[User]: ...
