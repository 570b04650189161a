"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- rooms/ -> get_room
- users/ -> list_users
"""

from secret_nick.application.queries.rooms import GetRoomQuery, GetRoomHandler
from secret_nick.application.queries.users import ListUsersQuery, ListUsersHandler

__all__ = [
    # rooms
    "GetRoomQuery",
    "GetRoomHandler",
    # users
    "ListUsersQuery",
    "ListUsersHandler",
]
