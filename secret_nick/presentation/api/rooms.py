"""
Rooms API Router.

Flow:
  HTTP Request → Router → Query → Handler → Repository → Database
"""

from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject

from secret_nick.application.dto.room import RoomDTO
from secret_nick.application.queries.rooms import GetRoomQuery, GetRoomHandler
from secret_nick.config.settings import Config
from secret_nick.domain.exceptions import EntityNotFoundError
from secret_nick.domain.value_objects.user_code import UserCode
from secret_nick.presentation.dependencies.user_code import get_user_code

router = APIRouter(prefix=f"{Config.API_PREFIX}/rooms", tags=["rooms"])


@router.get(
    "",
    response_model=RoomDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_room(
    handler: FromDishka[GetRoomHandler],
    user_code: UserCode = Depends(get_user_code),
):
    """Room details for the member identified by userCode."""
    try:
        room = await handler.execute(GetRoomQuery(user_code=user_code))
    except EntityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=e.to_detail()
        ) from e

    return RoomDTO.from_entity(room)
