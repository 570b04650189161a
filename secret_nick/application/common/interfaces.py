"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class DeleteUserCommand(Command[Room]):
        user_code: UserCode
        user_id: UserId

    class DeleteUserHandler(CommandHandler[Room]):
        def __init__(self, rooms: RoomRepository, users: UserReadOnlyRepository):
            ...

        async def execute(self, command: DeleteUserCommand) -> Room:
            room = await self._rooms.get_by_user_code(command.user_code)
            room.remove_user(command.user_id)
            await self._rooms.update(room)
            return room
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...


class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
