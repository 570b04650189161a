"""
Users API Router - participant list and participant removal.

Thin layer: builds commands/queries, delegates to handlers, and maps domain
errors to HTTP status codes:

    EntityNotFoundError    → 404
    AccessDeniedError      → 403
    DomainValidationError  → 400

A DataInconsistencyError is still a 400 for the client, but it means the
stored membership and the loaded room disagree, so it is logged as an error
and counted separately.
"""

from logging import getLogger
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject

from secret_nick.application.commands.users import (
    DeleteUserCommand,
    DeleteUserHandler,
)
from secret_nick.application.dto.room import RoomDTO
from secret_nick.application.dto.user import UserDTO
from secret_nick.application.queries.users import ListUsersQuery, ListUsersHandler
from secret_nick.config.settings import Config
from secret_nick.domain.exceptions import (
    AccessDeniedError,
    DataInconsistencyError,
    DomainValidationError,
    EntityNotFoundError,
)
from secret_nick.domain.value_objects.user_code import UserCode
from secret_nick.domain.value_objects.user_id import UserId
from secret_nick.observability.metrics import (
    MetricsErrorType,
    RemovalOutcome,
    increment_error,
    increment_user_removal,
)
from secret_nick.presentation.dependencies.user_code import get_user_code

logger = getLogger(__name__)


router = APIRouter(prefix=f"{Config.API_PREFIX}/users", tags=["users"])


@router.get(
    "",
    response_model=list[UserDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_users(
    handler: FromDishka[ListUsersHandler],
    user_code: UserCode = Depends(get_user_code),
):
    """List participants of the caller's room."""
    try:
        users = await handler.execute(ListUsersQuery(user_code=user_code))
    except EntityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=e.to_detail()
        ) from e

    return [UserDTO.from_entity(user) for user in users]


@router.delete(
    "/{user_id}",
    response_model=RoomDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_user(
    user_id: int,
    handler: FromDishka[DeleteUserHandler],
    user_code: UserCode = Depends(get_user_code),
):
    """
    Remove participant `user_id` from the room administered by `userCode`.

    Response: the updated room with its remaining participants.
    """
    try:
        command = DeleteUserCommand(user_code=user_code, user_id=UserId(user_id))
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[{"field": "id", "message": str(e)}],
        ) from e

    try:
        room = await handler.execute(command)
    except EntityNotFoundError as e:
        increment_user_removal(RemovalOutcome.NOT_FOUND)
        logger.info(f"Removal of user {user_id} rejected: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=e.to_detail()
        ) from e
    except AccessDeniedError as e:
        increment_user_removal(RemovalOutcome.FORBIDDEN)
        logger.info(f"Removal of user {user_id} rejected: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail=e.to_detail()
        ) from e
    except DataInconsistencyError as e:
        increment_user_removal(RemovalOutcome.DATA_INCONSISTENCY)
        increment_error(MetricsErrorType.DATA_INCONSISTENCY)
        logger.error(
            f"User {user_id} is stored in the caller's room but was not loaded with it"
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=e.to_detail()
        ) from e
    except DomainValidationError as e:
        increment_user_removal(RemovalOutcome.BAD_REQUEST)
        logger.info(f"Removal of user {user_id} rejected: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=e.to_detail()
        ) from e

    increment_user_removal(RemovalOutcome.SUCCESS)
    return RoomDTO.from_entity(room)
