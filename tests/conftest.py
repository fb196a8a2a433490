import pytest
from datetime import datetime, timedelta, timezone

from travel_store.application.services.local_store import LocalStore
from travel_store.domain.entities import User
from travel_store.infrastructure.service_container import ServiceContainer
from travel_store.infrastructure.storage.memory_storage import InMemoryStorage

# ---------- TEST FIXTURES ----------

START = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Controllable clock injected into the store."""

    def __init__(self, start: datetime = START):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def store(storage, clock):
    return LocalStore(storage, clock=clock)


@pytest.fixture
def alice(store):
    user = User(id="user_alice", username="alice", email="a@x.com", created_at=store.timestamp())
    store.save_user(user)
    return user


@pytest.fixture
def bob(store):
    user = User(id="user_bob", username="bob", email="b@x.com", created_at=store.timestamp())
    store.save_user(user)
    return user


@pytest.fixture(autouse=True)
def reset_container():
    ServiceContainer.reset()
    yield
    ServiceContainer.reset()
