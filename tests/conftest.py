"""
Test configuration and fixtures

- An isolated in-memory SeatStore per test (default layout: seats 1-40
  designated and unassigned, 41-50 floaters)
- A frozen clock the tests move by hand
- Helpers that create users without paying for bcrypt
"""
from datetime import datetime, timedelta
from typing import Optional

import pytest

from hotdesk.db.session import SeatStore
from hotdesk.services import users
from hotdesk.services.engine import BookingEngine

from tests.constants import DEFAULT_NOW


class FrozenClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)

    def set(self, now: datetime) -> None:
        self.now = now


@pytest.fixture
def store():
    seat_store = SeatStore("sqlite://")
    seat_store.init()
    yield seat_store
    seat_store.dispose()


@pytest.fixture
def clock():
    return FrozenClock(DEFAULT_NOW)


@pytest.fixture
def engine(store, clock):
    return BookingEngine(store, clock=clock)


def make_user(
    store: SeatStore,
    name: str,
    batch: str = "batch1",
    designated_seat_id: Optional[int] = None,
    role: str = "user",
) -> str:
    with store.transaction() as db:
        user = users.register_user(
            db,
            name=name.title(),
            email=f"{name}@company.com",
            password_hash="not-a-real-hash",
            batch=batch,
            designated_seat_id=designated_seat_id,
            role=role,
        )
        return user.id


@pytest.fixture
def alice(store):
    """batch1, owns designated seat 1."""
    return make_user(store, "alice", batch="batch1", designated_seat_id=1)


@pytest.fixture
def bob(store):
    """batch2, no designated seat."""
    return make_user(store, "bob", batch="batch2")


@pytest.fixture
def carol(store):
    """batch1, no designated seat."""
    return make_user(store, "carol", batch="batch1")
