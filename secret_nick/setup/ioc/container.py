"""
Dishka DI Container Setup.

- PrismaProvider: Prisma client (singleton) and Prisma repositories
- RoomRepositoryProvider: both room ports -> PrismaRoomRepository
- CachedRoomRepositoryProvider: used instead of RoomRepositoryProvider when
  Config.USE_REDIS_CACHE is on, with a Redis client
    RoomReadOnlyRepository -> CachedRoomRepository (queries)
    RoomRepository -> CacheInvalidatingRoomRepository (commands, DB reads)
- HandlerProvider: command/query handlers (see providers.py)

Scopes:
- Scope.APP = created ONCE when app starts, shared across all requests
- Scope.REQUEST = new instance per HTTP request

Flow:
  Container → provides → PrismaRoomRepository → to → DeleteUserHandler
                                   ↓
                           uses RoomRepository interface
"""

from typing import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from prisma import Prisma
from redis.asyncio import Redis

from secret_nick.config.settings import Config
from secret_nick.domain.ports.repositories import (
    RoomReadOnlyRepository,
    RoomRepository,
    UserReadOnlyRepository,
)
from secret_nick.infrastructure.cache import (
    CacheInvalidatingRoomRepository,
    CachedRoomRepository,
    close_redis_client,
    create_redis_client,
)
from secret_nick.infrastructure.persistence import (
    PrismaRoomRepository,
    PrismaUserRepository,
)
from secret_nick.setup.ioc.providers import HandlerProvider


class PrismaProvider(Provider):
    """Database client and Prisma-backed repositories."""

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        Connected on first use, disconnected when the container closes.
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserReadOnlyRepository:
        return PrismaUserRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_prisma_room_repository(self, prisma: Prisma) -> PrismaRoomRepository:
        return PrismaRoomRepository(prisma)


class RoomRepositoryProvider(Provider):
    @provide(scope=Scope.REQUEST)
    def get_room_repository(self, repo: PrismaRoomRepository) -> RoomRepository:
        return repo

    @provide(scope=Scope.REQUEST)
    def get_room_read_repository(
        self, repo: PrismaRoomRepository
    ) -> RoomReadOnlyRepository:
        return repo


class CachedRoomRepositoryProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_redis(self) -> AsyncIterable[Redis]:
        client = await create_redis_client()
        yield client
        await close_redis_client(client)

    @provide(scope=Scope.REQUEST)
    def get_cached_room_repository(
        self, repo: PrismaRoomRepository, redis: Redis
    ) -> CachedRoomRepository:
        return CachedRoomRepository(repo, redis, ttl=Config.REDIS_CACHE_TTL)

    @provide(scope=Scope.REQUEST)
    def get_room_read_repository(
        self, cached: CachedRoomRepository
    ) -> RoomReadOnlyRepository:
        return cached

    @provide(scope=Scope.REQUEST)
    def get_room_repository(
        self, repo: PrismaRoomRepository, cached: CachedRoomRepository
    ) -> RoomRepository:
        return CacheInvalidatingRoomRepository(repo, cached)


def create_container(use_cache: bool = Config.USE_REDIS_CACHE) -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE at app startup.
    """
    room_provider = (
        CachedRoomRepositoryProvider() if use_cache else RoomRepositoryProvider()
    )
    return make_async_container(PrismaProvider(), room_provider, HandlerProvider())
