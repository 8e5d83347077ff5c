"""Lock manager: short-lived exclusive holds on seats."""
import threading
from datetime import timedelta

import pytest

from hotdesk.core.exceptions import ConflictError, ValidationError
from hotdesk.models import SeatLock
from tests.conftest import make_user
from tests.constants import DEFAULT_NOW, FLOATER_A, FLOATER_B, FLOATER_C, WEEK1_MON

pytestmark = pytest.mark.integration


def _status(engine, viewer, seat_id):
    state = engine.get_seat_state(WEEK1_MON, viewer)
    return next(s for s in state.seats if s.seat_id == seat_id)


class TestAcquire:
    def test_lock_lasts_two_minutes(self, engine, carol):
        result = engine.acquire_locks(carol, WEEK1_MON, [FLOATER_A, FLOATER_B])

        assert result.success
        assert result.locked_seats == [FLOATER_A, FLOATER_B]
        assert result.locked_until == DEFAULT_NOW + timedelta(minutes=2)

    def test_relocking_refreshes_expiry(self, engine, clock, carol):
        engine.acquire_locks(carol, WEEK1_MON, [FLOATER_A])
        clock.advance(minutes=1)

        result = engine.acquire_locks(carol, WEEK1_MON, [FLOATER_A])

        assert result.locked_until == DEFAULT_NOW + timedelta(minutes=3)
        assert _status(engine, carol, FLOATER_A).lock_expiry == result.locked_until

    def test_live_lock_of_another_user_rejects_whole_batch(self, engine, carol, bob):
        engine.acquire_locks(bob, WEEK1_MON, [FLOATER_B])

        with pytest.raises(ConflictError, match=f"Seat {FLOATER_B} is locked by another user"):
            engine.acquire_locks(carol, WEEK1_MON, [FLOATER_A, FLOATER_B])

        assert _status(engine, carol, FLOATER_A).status == "available"
        assert _status(engine, carol, FLOATER_B).locked_by == bob

    def test_booked_seat_cannot_be_locked(self, engine, carol, bob):
        engine.confirm_booking(bob, WEEK1_MON, [FLOATER_A])

        with pytest.raises(ConflictError, match="already booked"):
            engine.acquire_locks(carol, WEEK1_MON, [FLOATER_A])

    def test_expired_lock_does_not_block(self, engine, clock, carol, bob):
        engine.acquire_locks(bob, WEEK1_MON, [FLOATER_A])
        clock.advance(minutes=2)

        result = engine.acquire_locks(carol, WEEK1_MON, [FLOATER_A])

        assert result.locked_seats == [FLOATER_A]
        assert _status(engine, carol, FLOATER_A).locked_by == carol

    def test_concurrent_acquires_lock_a_seat_once(self, engine, store):
        contenders = [make_user(store, f"racer{i}", batch="batch1") for i in range(4)]
        barrier = threading.Barrier(len(contenders))
        winners = []
        outcomes = []

        def attempt(user_id):
            barrier.wait()
            try:
                engine.acquire_locks(user_id, WEEK1_MON, [FLOATER_A])
                winners.append(user_id)
                outcomes.append("locked")
            except ConflictError:
                outcomes.append("conflict")

        threads = [threading.Thread(target=attempt, args=(u,)) for u in contenders]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(outcomes) == ["conflict", "conflict", "conflict", "locked"]
        with store.transaction() as db:
            rows = db.query(SeatLock).filter(SeatLock.date == WEEK1_MON).all()
            assert [(lk.seat_id, lk.user_id) for lk in rows] == [(FLOATER_A, winners[0])]


class TestRelease:
    def test_release_own_locks(self, engine, carol):
        engine.acquire_locks(carol, WEEK1_MON, [FLOATER_A, FLOATER_B])

        result = engine.release_locks(carol, WEEK1_MON, [FLOATER_A])

        assert result.released_seats == [FLOATER_A]
        assert _status(engine, carol, FLOATER_A).status == "available"
        assert _status(engine, carol, FLOATER_B).status == "locked"

    def test_releasing_someone_elses_lock_is_a_no_op(self, engine, carol, bob):
        engine.acquire_locks(bob, WEEK1_MON, [FLOATER_A])

        result = engine.release_locks(carol, WEEK1_MON, [FLOATER_A, FLOATER_C])

        assert result.success
        assert result.released_seats == []
        assert _status(engine, carol, FLOATER_A).locked_by == bob

    def test_release_validates_seat_ids(self, engine, carol):
        with pytest.raises(ValidationError):
            engine.release_locks(carol, WEEK1_MON, [])


def test_sweeper_deletes_only_lapsed_locks(engine, clock, carol, bob):
    engine.acquire_locks(bob, WEEK1_MON, [FLOATER_A])
    clock.advance(minutes=1)
    engine.acquire_locks(carol, WEEK1_MON, [FLOATER_B])
    clock.advance(minutes=1)

    assert engine.purge_expired_locks() == 1
    assert _status(engine, carol, FLOATER_B).locked_by == carol
