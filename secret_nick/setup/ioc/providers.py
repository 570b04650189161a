"""
Handler provider - wires command/query handlers to repository ports.

Kept free of infrastructure imports: any provider that supplies
UserReadOnlyRepository, RoomReadOnlyRepository and RoomRepository (Prisma,
cached, in-memory) can be combined with it. DeleteUserHandler takes
RoomRepository, which never serves cached snapshots.
"""

from dishka import Provider, Scope, provide

from secret_nick.application.commands.users import DeleteUserHandler
from secret_nick.application.queries.rooms import GetRoomHandler
from secret_nick.application.queries.users import ListUsersHandler
from secret_nick.domain.ports.repositories import (
    RoomReadOnlyRepository,
    RoomRepository,
    UserReadOnlyRepository,
)


class HandlerProvider(Provider):
    """Command and query handlers, one instance per request."""

    @provide(scope=Scope.REQUEST)
    def get_delete_user_handler(
        self,
        room_repository: RoomRepository,
        user_repository: UserReadOnlyRepository,
    ) -> DeleteUserHandler:
        return DeleteUserHandler(room_repository, user_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_room_handler(
        self, room_repository: RoomReadOnlyRepository
    ) -> GetRoomHandler:
        return GetRoomHandler(room_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_users_handler(
        self, user_repository: UserReadOnlyRepository
    ) -> ListUsersHandler:
        return ListUsersHandler(user_repository)
