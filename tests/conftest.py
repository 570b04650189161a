from datetime import datetime, timedelta, timezone

import pytest
from dishka import Provider, Scope, make_async_container, provide
from fastapi.testclient import TestClient

from secret_nick.domain.ports.repositories import (
    RoomReadOnlyRepository,
    RoomRepository,
    UserReadOnlyRepository,
)
from secret_nick.fastapi_app import create_fastapi_app
from secret_nick.setup.ioc import HandlerProvider
from tests.factories import (
    InMemoryRoomRepository,
    InMemoryStore,
    InMemoryUserRepository,
    make_room,
    make_user,
)


class InMemoryRepositoryProvider(Provider):
    """Supplies the repository ports from an InMemoryStore."""

    def __init__(self, store: InMemoryStore):
        super().__init__()
        self._store = store

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserReadOnlyRepository:
        return InMemoryUserRepository(self._store)

    @provide(scope=Scope.APP)
    def get_room_repository(self) -> RoomRepository:
        return InMemoryRoomRepository(self._store)

    @provide(scope=Scope.APP)
    def get_room_read_repository(self) -> RoomReadOnlyRepository:
        return InMemoryRoomRepository(self._store)


@pytest.fixture()
def store():
    """
    Room 1 (open): admin 1 ("admin-code"), members 2 and 3 ("regular-code" is 3)
    Room 2 (open): admin 10, member 999
    Room 3 (closed yesterday): admin 20 ("closed-admin-code"), member 21
    """
    yesterday = datetime.now(timezone.utc) - timedelta(days=1)
    return InMemoryStore(
        rooms=[
            make_room(
                1,
                users=[
                    make_user(1, is_admin=True, code="admin-code"),
                    make_user(2),
                    make_user(3, code="regular-code"),
                ],
            ),
            make_room(
                2,
                users=[
                    make_user(10, room_id=2, is_admin=True),
                    make_user(999, room_id=2),
                ],
            ),
            make_room(
                3,
                closed_on=yesterday,
                users=[
                    make_user(20, room_id=3, is_admin=True, code="closed-admin-code"),
                    make_user(21, room_id=3),
                ],
            ),
        ]
    )


@pytest.fixture()
def app(store):
    """Create a FastAPI app wired to the in-memory store for each test."""
    container = make_async_container(InMemoryRepositoryProvider(store), HandlerProvider())
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)
