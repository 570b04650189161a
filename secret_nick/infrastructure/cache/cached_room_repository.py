"""
Cached Room Repository - Decorator pattern for Redis caching.

Architecture:
    CachedRoomRepository (read-through decorator, queries only)
        ↓ wraps
    PrismaRoomRepository (concrete implementation)

    CacheInvalidatingRoomRepository (commands)
        - reads go straight to PrismaRoomRepository
        - writes go to PrismaRoomRepository, then drop the room's snapshots

Commands authorize against closed_on and the member list, and closed_on is
set outside this service without touching the cache. So only queries read
snapshots; commands always load the room from the DB.

Redis Data Structures:
- "room:code:{user_code}" STRING -> JSON snapshot of the room with members
- "room:{room_id}:codes"  SET    -> user codes that currently have a snapshot
- TTL: Config.REDIS_CACHE_TTL on both

The SET is what makes invalidation complete: a removed member's code is no
longer in room.users, but its snapshot key is still listed in the SET.

Error Handling:
- Cache failures never fail the operation; they are logged and the DB is used
"""

import json
import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from redis.asyncio import Redis

from secret_nick.config.settings import Config
from secret_nick.domain.entities.room import Room
from secret_nick.domain.entities.user import User
from secret_nick.domain.ports.repositories.room_repository import (
    RoomReadOnlyRepository,
    RoomRepository,
)
from secret_nick.domain.value_objects.room_id import RoomId
from secret_nick.domain.value_objects.user_code import UserCode
from secret_nick.domain.value_objects.user_id import UserId
from secret_nick.domain.value_objects.wish import Wish

logger = logging.getLogger(__name__)


def _dt(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _parse_dt(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


class CachedRoomRepository(RoomReadOnlyRepository):
    """
    Decorator: adds Redis caching to RoomReadOnlyRepository.

    Snapshots may be up to ttl seconds old; use it for queries only.
    """

    def __init__(
        self,
        repo: RoomReadOnlyRepository,
        redis: Redis,
        ttl: int = Config.REDIS_CACHE_TTL,
    ):
        self._repo = repo
        self._redis = redis
        self._ttl = ttl

    def _code_key(self, user_code: UserCode) -> str:
        return f"room:code:{user_code.value}"

    def _codes_key(self, room_id: RoomId) -> str:
        return f"room:{room_id.value}:codes"

    def _serialize_user(self, user: User) -> dict:
        return {
            "id": user.id.value,
            "user_code": user.user_code.value,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "is_admin": user.is_admin,
            "room_id": user.room_id.value if user.room_id else None,
            "phone": user.phone,
            "email": user.email,
            "delivery_info": user.delivery_info,
            "gift_to_user_id": user.gift_to_user_id.value if user.gift_to_user_id else None,
            "wishes": [
                {"name": wish.name, "info_link": wish.info_link} for wish in user.wishes
            ],
            "created_on": _dt(user.created_on),
            "modified_on": _dt(user.modified_on),
        }

    def _deserialize_user(self, d: dict) -> User:
        return User(
            id=UserId(d["id"]),
            user_code=UserCode(d["user_code"]),
            first_name=d["first_name"],
            last_name=d["last_name"],
            is_admin=d["is_admin"],
            room_id=RoomId(d["room_id"]) if d.get("room_id") else None,
            phone=d.get("phone", ""),
            email=d.get("email"),
            delivery_info=d.get("delivery_info", ""),
            gift_to_user_id=UserId(d["gift_to_user_id"]) if d.get("gift_to_user_id") else None,
            wishes=[Wish(**wish) for wish in d.get("wishes", [])],
            created_on=_parse_dt(d.get("created_on")),
            modified_on=_parse_dt(d.get("modified_on")),
        )

    def _serialize_room(self, room: Room) -> str:
        room_dict = {
            "id": room.id.value,
            "name": room.name,
            "description": room.description,
            "invitation_code": room.invitation_code,
            "gift_exchange_date": _dt(room.gift_exchange_date),
            "gift_maximum_budget": (
                str(room.gift_maximum_budget)
                if room.gift_maximum_budget is not None
                else None
            ),
            "admin_id": room.admin_id.value if room.admin_id else None,
            "closed_on": _dt(room.closed_on),
            "created_on": _dt(room.created_on),
            "modified_on": _dt(room.modified_on),
            "users": [self._serialize_user(user) for user in room.users],
        }
        return json.dumps(room_dict)

    def _deserialize_room(self, json_str: str) -> Room:
        d = json.loads(json_str)
        budget = d.get("gift_maximum_budget")
        return Room(
            id=RoomId(d["id"]),
            name=d["name"],
            description=d.get("description", ""),
            invitation_code=d["invitation_code"],
            gift_exchange_date=_parse_dt(d.get("gift_exchange_date")),
            gift_maximum_budget=Decimal(budget) if budget is not None else None,
            admin_id=UserId(d["admin_id"]) if d.get("admin_id") else None,
            closed_on=_parse_dt(d.get("closed_on")),
            created_on=_parse_dt(d.get("created_on")),
            modified_on=_parse_dt(d.get("modified_on")),
            users=[self._deserialize_user(user) for user in d.get("users", [])],
        )

    async def get_by_user_code(self, user_code: UserCode) -> Optional[Room]:
        """Get room by member code with Redis read-through caching."""
        cache_key = self._code_key(user_code)

        # 1. Try cache first (fast path)
        try:
            cached = await self._redis.get(cache_key)
            if cached:
                logger.debug(f"Cache HIT for {cache_key}")
                return self._deserialize_room(cached)
        except Exception as e:
            logger.warning(f"Redis cache read error for {cache_key}: {str(e)}")

        # 2. Cache miss - fetch from DB
        logger.debug(f"Cache MISS for {cache_key}")
        room = await self._repo.get_by_user_code(user_code)
        if room is None:
            return None

        # 3. Populate cache (best effort)
        try:
            codes_key = self._codes_key(room.id)
            await self._redis.setex(cache_key, self._ttl, self._serialize_room(room))
            await self._redis.sadd(codes_key, user_code.value)
            await self._redis.expire(codes_key, self._ttl)
            logger.debug(f"Cache POPULATED for {cache_key}")
        except Exception as e:
            logger.warning(f"Redis cache write error for {cache_key}: {str(e)}")

        return room

    async def invalidate(self, room_id: RoomId) -> None:
        """Drop every cached snapshot of the room (best effort)."""
        codes_key = self._codes_key(room_id)
        try:
            codes = await self._redis.smembers(codes_key)
            keys = [self._code_key(UserCode(code)) for code in codes]
            await self._redis.delete(codes_key, *keys)
            logger.debug(f"Cache INVALIDATED {len(keys)} entries for room {room_id}")
        except Exception as e:
            logger.warning(f"Redis cache invalidation error for {codes_key}: {str(e)}")


class CacheInvalidatingRoomRepository(RoomRepository):
    """
    RoomRepository for commands: uncached reads, writes that invalidate.

    Implements the same interface, so callers don't know caching exists.
    """

    def __init__(self, repo: RoomRepository, cache: CachedRoomRepository):
        self._repo = repo
        self._cache = cache

    async def get_by_user_code(self, user_code: UserCode) -> Optional[Room]:
        """Always load from the DB; a snapshot may predate the room closing."""
        return await self._repo.get_by_user_code(user_code)

    async def update(self, room: Room) -> None:
        """
        Update room in DB, then drop every cached snapshot of it.

        The DB write is the source of truth and its errors propagate.
        """
        await self._repo.update(room)
        await self._cache.invalidate(room.id)
