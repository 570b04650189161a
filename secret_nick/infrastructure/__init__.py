"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Database implementations (Prisma repositories)
- cache/: Redis caching implementations (CachedRoomRepository,
  CacheInvalidatingRoomRepository)
"""
