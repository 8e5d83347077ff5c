import logging
from datetime import date, datetime, timedelta
from typing import List, Sequence, Tuple

from sqlalchemy.orm import Session

from hotdesk.core.exceptions import ConflictError
from hotdesk.models.booking import SeatLock
from hotdesk.models.user import User
from hotdesk.services import reservations
from hotdesk.services.policy import validate_seat_ids, validate_selection

logger = logging.getLogger(__name__)


def acquire_locks(
    db: Session,
    user: User,
    day: date,
    seat_ids: Sequence[int],
    now: datetime,
    ttl: timedelta,
) -> Tuple[List[int], datetime]:
    """
    Hold every requested seat for `ttl`, or none of them.

    Re-locking one's own seat refreshes its expiry; a stale lock left by
    someone else is taken over. Returns the locked seat ids and the expiry.
    """
    validate_selection(db, user, day, seat_ids, now, confirming=False)

    bookings = reservations.bookings_for(db, day, seat_ids)
    locks = reservations.locks_for(db, day, seat_ids)

    for seat_id in seat_ids:
        if seat_id in bookings:
            raise ConflictError(f"Seat {seat_id} is already booked")
        lock = locks.get(seat_id)
        if lock and lock.user_id != user.id and lock.is_live(now):
            raise ConflictError(f"Seat {seat_id} is locked by another user")

    expires_at = now + ttl
    for seat_id in seat_ids:
        lock = locks.get(seat_id)
        if lock:
            lock.user_id = user.id
            lock.expires_at = expires_at
        else:
            db.add(SeatLock(date=day, seat_id=seat_id, user_id=user.id, expires_at=expires_at))

    logger.info("User %s locked seats %s for %s until %s.", user.id, list(seat_ids), day, expires_at)
    return list(seat_ids), expires_at


def release_locks(db: Session, user: User, day: date, seat_ids: Sequence[int]) -> List[int]:
    """Drop the caller's own locks; seats not locked by the caller are left alone."""
    validate_seat_ids(db, seat_ids)

    locks = reservations.locks_for(db, day, seat_ids)
    released = [seat_id for seat_id in seat_ids if seat_id in locks and locks[seat_id].user_id == user.id]
    if released:
        reservations.delete_locks(db, day, released, user_id=user.id)
        logger.info("User %s released seats %s for %s.", user.id, released, day)
    return released
