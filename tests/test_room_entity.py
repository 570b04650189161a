"""Room aggregate: membership removal and the closed-room freeze."""

from datetime import datetime, timedelta, timezone

import pytest

from secret_nick.domain.exceptions import DomainValidationError
from secret_nick.domain.value_objects.user_id import UserId
from tests.factories import make_room, make_user


def test_remove_user_detaches_member():
    admin = make_user(1, is_admin=True)
    member = make_user(2)
    room = make_room(users=[admin, member])

    room.remove_user(UserId(2))

    assert room.user_ids == [UserId(1)]


def test_remove_user_mutates_the_same_list():
    room = make_room(users=[make_user(1, is_admin=True), make_user(2)])
    users = room.users

    room.remove_user(UserId(2))

    assert users is room.users
    assert [user.id.value for user in users] == [1]


def test_remove_user_leaves_other_fields_untouched():
    room = make_room(users=[make_user(1, is_admin=True), make_user(2)])
    before = (room.name, room.invitation_code, room.admin_id, room.modified_on)

    room.remove_user(UserId(2))

    assert (room.name, room.invitation_code, room.admin_id, room.modified_on) == before


def test_remove_absent_user_is_noop():
    room = make_room(users=[make_user(1, is_admin=True)])

    room.remove_user(UserId(42))
    room.remove_user(UserId(42))

    assert room.user_ids == [UserId(1)]


def test_closed_room_rejects_removal():
    yesterday = datetime.now(timezone.utc) - timedelta(days=1)
    room = make_room(users=[make_user(1, is_admin=True), make_user(2)], closed_on=yesterday)

    with pytest.raises(DomainValidationError) as exc_info:
        room.remove_user(UserId(2))

    assert exc_info.value.fields == ["room.ClosedOn"]
    assert room.user_ids == [UserId(1), UserId(2)]


def test_find_user():
    member = make_user(2)
    room = make_room(users=[make_user(1, is_admin=True), member])

    assert room.find_user(UserId(2)) is member
    assert room.find_user(UserId(3)) is None


@pytest.mark.parametrize("value", [0, -1, True, "2"])
def test_user_id_rejects_invalid_values(value):
    with pytest.raises(ValueError):
        UserId(value)
