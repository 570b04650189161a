"""Room-related queries."""

from secret_nick.application.queries.rooms.get_room import (
    GetRoomQuery,
    GetRoomHandler,
)

__all__ = [
    "GetRoomQuery",
    "GetRoomHandler",
]
