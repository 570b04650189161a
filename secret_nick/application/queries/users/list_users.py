"""
List Users Query - Participants of the caller's room.

The client reloads this list after a participant is removed.
"""

from dataclasses import dataclass

from secret_nick.application.common.interfaces import Query, QueryHandler
from secret_nick.domain.entities.user import User
from secret_nick.domain.exceptions import EntityNotFoundError
from secret_nick.domain.ports.repositories import UserReadOnlyRepository
from secret_nick.domain.value_objects.user_code import UserCode


@dataclass(frozen=True)
class ListUsersQuery(Query[list[User]]):
    user_code: UserCode


class ListUsersHandler(QueryHandler[list[User]]):
    def __init__(self, user_repository: UserReadOnlyRepository):
        self._user_repository = user_repository

    async def execute(self, query: ListUsersQuery) -> list[User]:
        caller = await self._user_repository.get_by_code(query.user_code)
        if not caller:
            raise EntityNotFoundError(
                "User with such code not found.", field="userCode"
            )
        if caller.room_id is None:
            return []

        users = await self._user_repository.get_by_room(caller.room_id)
        return sorted(users, key=lambda user: user.id.value)
