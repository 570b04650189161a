"""
Mapping from Prisma records to domain entities.

Prisma model fields are snake_case and match prisma/schema.prisma:
- User: id, user_code, first_name, last_name, phone, email, delivery_info,
  is_admin, gift_to_user_id, room_id, wishes, created_on, modified_on
- Room: id, name, description, invitation_code, gift_exchange_date,
  gift_maximum_budget, admin_id, closed_on, created_on, modified_on, users
"""

from secret_nick.domain.entities.room import Room
from secret_nick.domain.entities.user import User
from secret_nick.domain.value_objects.room_id import RoomId
from secret_nick.domain.value_objects.user_code import UserCode
from secret_nick.domain.value_objects.user_id import UserId
from secret_nick.domain.value_objects.wish import Wish


def to_user(record) -> User:
    """Map Prisma User record to domain entity. Relations are optional."""
    wishes = getattr(record, "wishes", None) or []
    return User(
        id=UserId(record.id),
        user_code=UserCode(record.user_code),
        first_name=record.first_name,
        last_name=record.last_name,
        is_admin=record.is_admin,
        room_id=RoomId(record.room_id) if record.room_id else None,
        phone=record.phone or "",
        email=record.email,
        delivery_info=record.delivery_info or "",
        gift_to_user_id=UserId(record.gift_to_user_id) if record.gift_to_user_id else None,
        wishes=[Wish(name=wish.name, info_link=wish.info_link) for wish in wishes],
        created_on=record.created_on,
        modified_on=record.modified_on,
    )


def to_room(record) -> Room:
    """Map Prisma Room record (with users included) to domain entity."""
    return Room(
        id=RoomId(record.id),
        name=record.name,
        description=record.description or "",
        invitation_code=record.invitation_code,
        gift_exchange_date=record.gift_exchange_date,
        gift_maximum_budget=record.gift_maximum_budget,
        admin_id=UserId(record.admin_id) if record.admin_id else None,
        closed_on=record.closed_on,
        created_on=record.created_on,
        modified_on=record.modified_on,
        users=[to_user(user) for user in (record.users or [])],
    )
