"""HTTP boundary: status mapping and structured error bodies."""

import logging

from secret_nick.domain.value_objects.user_id import UserId


def _fields(response):
    return [error["field"] for error in response.json()["error"]]


def test_delete_user_success(client, store):
    res = client.delete("/api/users/2", params={"userCode": "admin-code"})

    assert res.status_code == 200
    body = res.json()
    assert body["id"] == 1
    assert sorted(user["id"] for user in body["users"]) == [1, 3]
    assert store.users[UserId(2)].room_id is None
    assert store.update_calls == 1


def test_deleted_user_disappears_from_participant_list(client):
    client.delete("/api/users/2", params={"userCode": "admin-code"})

    res = client.get("/api/users", params={"userCode": "admin-code"})

    assert res.status_code == 200
    assert [user["id"] for user in res.json()] == [1, 3]


def test_delete_user_invalid_code(client, store):
    res = client.delete("/api/users/999", params={"userCode": "invalid-code-12345"})

    assert res.status_code == 404
    assert _fields(res) == ["userCode"]
    assert store.update_calls == 0


def test_delete_user_with_special_characters_in_code(client):
    res = client.delete(
        "/api/users/1", params={"userCode": "code<script>alert('xss')</script>"}
    )

    assert res.status_code == 404


def test_delete_user_by_regular_user(client, store):
    res = client.delete("/api/users/2", params={"userCode": "regular-code"})

    assert res.status_code == 403
    assert _fields(res) == ["userCode"]
    assert store.users[UserId(2)].room_id is not None


def test_admin_cannot_delete_themselves(client, store):
    res = client.delete("/api/users/1", params={"userCode": "admin-code"})

    assert res.status_code == 400
    assert _fields(res) == ["id"]
    assert store.update_calls == 0


def test_delete_user_from_different_room(client, store):
    res = client.delete("/api/users/999", params={"userCode": "admin-code"})

    assert res.status_code == 403
    assert _fields(res) == ["id"]
    assert "different rooms" in res.json()["error"][0]["message"]
    assert store.users[UserId(999)].room_id.value == 2


def test_delete_user_that_does_not_exist(client):
    res = client.delete("/api/users/999999", params={"userCode": "admin-code"})

    assert res.status_code == 404
    assert _fields(res) == ["id"]


def test_delete_user_in_closed_room(client, store):
    res = client.delete("/api/users/21", params={"userCode": "closed-admin-code"})

    assert res.status_code == 400
    assert _fields(res) == ["room.ClosedOn"]
    assert store.users[UserId(21)].room_id.value == 3
    assert store.update_calls == 0


def test_data_inconsistency_is_logged_as_error(client, store, caplog):
    store.unloaded_user_ids.add(UserId(3))

    with caplog.at_level(logging.ERROR, logger="secret_nick"):
        res = client.delete("/api/users/3", params={"userCode": "admin-code"})

    assert res.status_code == 400
    assert _fields(res) == ["id"]
    assert "inconsistency" in res.json()["error"][0]["message"].lower()
    assert any(record.levelno == logging.ERROR for record in caplog.records)


def test_delete_users_one_by_one_leaves_only_admin(client):
    for user_id in (2, 3):
        res = client.delete(f"/api/users/{user_id}", params={"userCode": "admin-code"})
        assert res.status_code == 200

    users = client.get("/api/users", params={"userCode": "admin-code"}).json()

    assert len(users) == 1
    assert users[0]["is_admin"] is True


def test_delete_user_missing_user_code(client):
    res = client.delete("/api/users/2")

    assert res.status_code == 400
    assert res.json()["error"] == "Validation error"


def test_delete_user_empty_user_code(client):
    res = client.delete("/api/users/2", params={"userCode": " "})

    assert res.status_code == 400
    assert _fields(res) == ["userCode"]


def test_delete_user_non_positive_id(client):
    res = client.delete("/api/users/0", params={"userCode": "admin-code"})

    assert res.status_code == 400
    assert _fields(res) == ["id"]


def test_delete_user_non_integer_id(client):
    res = client.delete("/api/users/abc", params={"userCode": "admin-code"})

    assert res.status_code == 400


def test_get_room(client):
    res = client.get("/api/rooms", params={"userCode": "regular-code"})

    assert res.status_code == 200
    body = res.json()
    assert body["id"] == 1
    assert body["is_closed"] is False
    assert body["admin_id"] == 1


def test_get_room_unknown_code(client):
    res = client.get("/api/rooms", params={"userCode": "nope"})

    assert res.status_code == 404
    assert _fields(res) == ["userCode"]


def test_list_users_unknown_code(client):
    res = client.get("/api/users", params={"userCode": "nope"})

    assert res.status_code == 404


def test_correlation_id_is_echoed(client):
    res = client.get("/health", headers={"X-Correlation-ID": "abc-123"})

    assert res.status_code == 200
    assert res.headers["X-Correlation-ID"] == "abc-123"


def test_metrics_endpoint_exposes_removal_counter(client):
    client.delete("/api/users/2", params={"userCode": "admin-code"})

    res = client.get("/metrics")

    assert res.status_code == 200
    assert "secret_nick_user_removals_total" in res.text
