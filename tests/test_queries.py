"""Room and participant queries against the in-memory store."""

import pytest

from secret_nick.application.queries.rooms import GetRoomHandler, GetRoomQuery
from secret_nick.application.queries.users import ListUsersHandler, ListUsersQuery
from secret_nick.domain.exceptions import EntityNotFoundError
from secret_nick.domain.value_objects.user_code import UserCode
from secret_nick.domain.value_objects.user_id import UserId
from tests.factories import (
    InMemoryRoomRepository,
    InMemoryStore,
    InMemoryUserRepository,
    make_room,
    make_user,
)


@pytest.fixture()
def store():
    return InMemoryStore(
        rooms=[
            make_room(1, users=[make_user(3), make_user(1, is_admin=True), make_user(2)]),
            make_room(2, users=[make_user(10, room_id=2, is_admin=True)]),
        ],
        users=[make_user(50, room_id=None)],
    )


@pytest.mark.asyncio
async def test_get_room_for_regular_member(store):
    handler = GetRoomHandler(InMemoryRoomRepository(store))

    room = await handler.execute(GetRoomQuery(user_code=UserCode("code-2")))

    assert room.id.value == 1
    assert sorted(user_id.value for user_id in room.user_ids) == [1, 2, 3]


@pytest.mark.asyncio
async def test_get_room_unknown_code(store):
    handler = GetRoomHandler(InMemoryRoomRepository(store))

    with pytest.raises(EntityNotFoundError) as exc_info:
        await handler.execute(GetRoomQuery(user_code=UserCode("nope")))

    assert exc_info.value.fields == ["userCode"]


@pytest.mark.asyncio
async def test_list_users_returns_room_members_ordered_by_id(store):
    handler = ListUsersHandler(InMemoryUserRepository(store))

    users = await handler.execute(ListUsersQuery(user_code=UserCode("code-1")))

    assert [user.id for user in users] == [UserId(1), UserId(2), UserId(3)]


@pytest.mark.asyncio
async def test_list_users_for_detached_user_is_empty(store):
    handler = ListUsersHandler(InMemoryUserRepository(store))

    assert await handler.execute(ListUsersQuery(user_code=UserCode("code-50"))) == []


@pytest.mark.asyncio
async def test_list_users_unknown_code(store):
    handler = ListUsersHandler(InMemoryUserRepository(store))

    with pytest.raises(EntityNotFoundError):
        await handler.execute(ListUsersQuery(user_code=UserCode("nope")))
