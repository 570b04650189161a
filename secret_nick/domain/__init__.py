"""
DOMAIN LAYER - Rooms, participants and membership rules

This layer contains:
- Entities: Business objects with identity (Room, User)
- Value Objects: Immutable types (UserId, RoomId, UserCode, Wish)
- Ports: Interfaces that infrastructure implements (repositories)
- Services: Pure membership rules (no I/O)
- Exceptions: Domain errors carrying field-tagged messages

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, Redis)
2. NO I/O operations
3. Only depends on Python stdlib
"""
