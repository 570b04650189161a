"""
Delete User Command - An administrator removes a participant from their room.

The participant is detached from the room, not deleted. Checks run in a fixed
order and the first failing one decides the error the caller sees:

1. caller code resolves to a user           -> EntityNotFoundError (userCode)
2. caller is an administrator               -> AccessDeniedError (userCode)
3. caller's room resolves                   -> EntityNotFoundError (userCode)
4. caller is not removing themselves        -> DomainValidationError (id)
5. target is a loaded member of the room    -> NOT_FOUND / OTHER_ROOM / INCONSISTENT
6. room accepts the removal                 -> DomainValidationError (room.ClosedOn)
7. room is persisted                        -> DomainValidationError ("")
"""

import asyncio
from dataclasses import dataclass
from functools import partial
from logging import getLogger

from secret_nick.application.common.interfaces import Command, CommandHandler
from secret_nick.domain.entities.room import Room
from secret_nick.domain.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    RoomUpdateError,
)
from secret_nick.domain.ports.repositories import (
    RoomRepository,
    UserReadOnlyRepository,
)
from secret_nick.domain.services.membership import (
    classify_missing_member,
    ensure_admin,
    ensure_not_self,
)
from secret_nick.domain.value_objects.user_code import UserCode
from secret_nick.domain.value_objects.user_id import UserId

logger = getLogger(__name__)


def _log_detached_update(room: Room, update: asyncio.Future) -> None:
    """Report the outcome of an update whose request was cancelled."""
    if update.cancelled():
        return
    error = update.exception()
    if error is not None:
        logger.warning(
            f"Failed to persist room {room.id} after the request was cancelled: {error}"
        )


@dataclass(frozen=True)
class DeleteUserCommand(Command[Room]):
    user_code: UserCode
    user_id: UserId


class DeleteUserHandler(CommandHandler[Room]):
    def __init__(
        self,
        room_repository: RoomRepository,
        user_repository: UserReadOnlyRepository,
    ):
        self._room_repository = room_repository
        self._user_repository = user_repository

    async def execute(self, command: DeleteUserCommand) -> Room:
        """
        Remove a participant from the administrator's room.

        Returns:
            The updated room, without the removed participant

        Raises:
            EntityNotFoundError: Caller, room or target does not exist
            AccessDeniedError: Caller is not an admin, or target is in another room
            DomainValidationError: Self-removal, closed room, data inconsistency
                or a failed update
        """
        # 1. Resolve caller
        caller = await self._user_repository.get_by_code(
            command.user_code, include_room=True, include_wishes=False
        )
        if not caller:
            raise EntityNotFoundError(
                "User with such code not found.", field="userCode"
            )

        # 2. Authorize
        ensure_admin(caller)

        # 3. Resolve room
        room = await self._room_repository.get_by_user_code(command.user_code)
        if not room:
            raise EntityNotFoundError(
                "Room with such user code not found.", field="userCode"
            )

        # 4. Self-deletion guard
        ensure_not_self(caller, command.user_id)

        # 5. Target must be a loaded member
        if room.find_user(command.user_id) is None:
            target = await self._user_repository.get_by_id(
                command.user_id, include_room=True, include_wishes=False
            )
            raise classify_missing_member(caller, target).to_error()

        # 6. Mutate (in memory only, nothing durable happened yet)
        room.remove_user(command.user_id)

        # 7. Persist; once started the update is not abandoned on cancellation
        update = asyncio.ensure_future(self._room_repository.update(room))
        try:
            await asyncio.shield(update)
        except RoomUpdateError as e:
            logger.warning(f"Failed to persist room {room.id}: {e.message}")
            raise DomainValidationError(e.message, field="") from e
        except asyncio.CancelledError:
            update.add_done_callback(partial(_log_detached_update, room))
            raise

        logger.info(
            f"User {command.user_id} removed from room {room.id} by user {caller.id}"
        )
        return room
