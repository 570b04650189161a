"""Get Room Query - Room details for any member of the room."""

from dataclasses import dataclass

from secret_nick.application.common.interfaces import Query, QueryHandler
from secret_nick.domain.entities.room import Room
from secret_nick.domain.exceptions import EntityNotFoundError
from secret_nick.domain.ports.repositories import RoomReadOnlyRepository
from secret_nick.domain.value_objects.user_code import UserCode


@dataclass(frozen=True)
class GetRoomQuery(Query[Room]):
    user_code: UserCode


class GetRoomHandler(QueryHandler[Room]):
    def __init__(self, room_repository: RoomReadOnlyRepository):
        self._room_repository = room_repository

    async def execute(self, query: GetRoomQuery) -> Room:
        room = await self._room_repository.get_by_user_code(query.user_code)
        if not room:
            raise EntityNotFoundError(
                "Room with such user code not found.", field="userCode"
            )
        return room
