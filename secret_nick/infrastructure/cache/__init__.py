"""
Cache Layer - Redis caching implementations.

Contains async Redis client and cached repository decorators.
"""

from secret_nick.infrastructure.cache.redis_client import (
    create_redis_client,
    close_redis_client,
)
from secret_nick.infrastructure.cache.cached_room_repository import (
    CacheInvalidatingRoomRepository,
    CachedRoomRepository,
)

__all__ = [
    "create_redis_client",
    "close_redis_client",
    "CachedRoomRepository",
    "CacheInvalidatingRoomRepository",
]
