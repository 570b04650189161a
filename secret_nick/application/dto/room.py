"""Room DTOs for API responses."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel
from typing import Optional

from secret_nick.application.dto.user import UserDTO
from secret_nick.domain.entities.room import Room


class RoomDTO(BaseModel):
    """Room details with its current members."""

    id: int
    name: str
    description: str = ""
    invitation_code: str
    gift_exchange_date: Optional[datetime] = None
    gift_maximum_budget: Optional[Decimal] = None
    admin_id: Optional[int] = None
    closed_on: Optional[datetime] = None
    created_on: Optional[datetime] = None
    modified_on: Optional[datetime] = None
    is_closed: bool = False
    users: list[UserDTO] = []

    @classmethod
    def from_entity(cls, room: Room) -> RoomDTO:
        return cls(
            id=room.id.value,
            name=room.name,
            description=room.description,
            invitation_code=room.invitation_code,
            gift_exchange_date=room.gift_exchange_date,
            gift_maximum_budget=room.gift_maximum_budget,
            admin_id=room.admin_id.value if room.admin_id else None,
            closed_on=room.closed_on,
            created_on=room.created_on,
            modified_on=room.modified_on,
            is_closed=room.is_closed,
            users=[UserDTO.from_entity(user) for user in room.users],
        )
