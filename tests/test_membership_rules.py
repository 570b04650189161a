"""Pure membership predicates, tested without any repository."""

import pytest

from secret_nick.domain.exceptions import (
    AccessDeniedError,
    DataInconsistencyError,
    DomainValidationError,
    EntityNotFoundError,
)
from secret_nick.domain.services.membership import (
    MissingMemberReason,
    classify_missing_member,
    ensure_admin,
    ensure_not_self,
)
from secret_nick.domain.value_objects.user_id import UserId
from tests.factories import make_user


def test_ensure_admin_accepts_admin():
    ensure_admin(make_user(1, is_admin=True))


def test_ensure_admin_rejects_regular_user():
    with pytest.raises(AccessDeniedError) as exc_info:
        ensure_admin(make_user(2))

    assert exc_info.value.fields == ["userCode"]
    assert "not an administrator" in exc_info.value.message


def test_ensure_not_self_rejects_own_id():
    admin = make_user(1, is_admin=True)

    with pytest.raises(DomainValidationError) as exc_info:
        ensure_not_self(admin, UserId(1))

    assert exc_info.value.fields == ["id"]


def test_ensure_not_self_accepts_other_id():
    ensure_not_self(make_user(1, is_admin=True), UserId(2))


def test_classify_missing_member_not_found():
    caller = make_user(1, room_id=1, is_admin=True)

    assert classify_missing_member(caller, None) is MissingMemberReason.NOT_FOUND


def test_classify_missing_member_other_room():
    caller = make_user(1, room_id=1, is_admin=True)
    target = make_user(999, room_id=2)

    assert classify_missing_member(caller, target) is MissingMemberReason.OTHER_ROOM


def test_classify_missing_member_detached_user_is_other_room():
    caller = make_user(1, room_id=1, is_admin=True)
    target = make_user(5, room_id=None)

    assert classify_missing_member(caller, target) is MissingMemberReason.OTHER_ROOM


def test_classify_missing_member_same_room_is_inconsistent():
    caller = make_user(1, room_id=1, is_admin=True)
    target = make_user(2, room_id=1)

    assert classify_missing_member(caller, target) is MissingMemberReason.INCONSISTENT


@pytest.mark.parametrize(
    "reason, error_type",
    [
        (MissingMemberReason.NOT_FOUND, EntityNotFoundError),
        (MissingMemberReason.OTHER_ROOM, AccessDeniedError),
        (MissingMemberReason.INCONSISTENT, DataInconsistencyError),
    ],
)
def test_missing_member_reason_maps_to_error(reason, error_type):
    error = reason.to_error()

    assert type(error) is error_type
    assert error.fields == ["id"]


def test_data_inconsistency_is_a_bad_request():
    assert isinstance(MissingMemberReason.INCONSISTENT.to_error(), DomainValidationError)
