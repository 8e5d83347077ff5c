import logging
from datetime import date, datetime
from typing import List, Sequence, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hotdesk.core.exceptions import ConflictError, ValidationError
from hotdesk.models.booking import Booking, SeatLock
from hotdesk.models.leave import Leave
from hotdesk.models.user import User
from hotdesk.services import reservations
from hotdesk.services.policy import validate_seat_ids, validate_selection

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Confirm
# ---------------------------------------------------------------------------


def confirm_booking(
    db: Session,
    user: User,
    day: date,
    seat_ids: Sequence[int],
    now: datetime,
) -> List[int]:
    """
    Book every requested seat for the caller, or none of them.

    A seat fails the batch when it is already booked or when someone else
    holds a live lock on it. Lapsed locks are dropped first, whoever held them.
    """
    validate_selection(db, user, day, seat_ids, now, confirming=True)

    reservations.purge_expired_locks(db, now, day)
    bookings = reservations.bookings_for(db, day, seat_ids)
    locks = reservations.locks_for(db, day, seat_ids)

    for seat_id in seat_ids:
        if seat_id in bookings:
            raise ConflictError(f"Seat {seat_id} is already booked")
        lock = locks.get(seat_id)
        if lock is not None and lock.user_id != user.id:
            raise ConflictError(f"Seat {seat_id} is locked by another user")

    for seat_id in seat_ids:
        lock = locks.get(seat_id)
        if lock is not None:
            db.delete(lock)
        db.add(Booking(date=day, seat_id=seat_id, user_id=user.id, booked_at=now))

    try:
        db.flush()
    except IntegrityError:
        raise ConflictError("One or more seats were booked by someone else, please retry")

    logger.info("User %s booked seats %s for %s.", user.id, list(seat_ids), day)
    return list(seat_ids)


# ---------------------------------------------------------------------------
# Cancel
# ---------------------------------------------------------------------------


def cancel_booking(db: Session, user: User, day: date, seat_ids: Sequence[int]) -> List[int]:
    validate_seat_ids(db, seat_ids)

    bookings = reservations.bookings_for(db, day, seat_ids)
    for seat_id in seat_ids:
        booking = bookings.get(seat_id)
        if booking is None or booking.user_id != user.id:
            raise ValidationError(
                "You can only cancel your own booked seats for the given date. "
                f"Problem with seat {seat_id}"
            )

    for seat_id in seat_ids:
        db.delete(bookings[seat_id])
    reservations.delete_locks(db, day, seat_ids)

    logger.info("User %s cancelled seats %s for %s.", user.id, list(seat_ids), day)
    return list(seat_ids)


# ---------------------------------------------------------------------------
# Leave
# ---------------------------------------------------------------------------


def mark_leave(db: Session, user: User, day: date) -> Tuple[bool, int]:
    """
    Record that the user is away on `day`; repeating the call changes nothing.

    A designated-seat holder's floater_leave_count grows once per new leave.
    Any booking or lock the user holds for the date is released. Returns
    (created, number of bookings released).
    """
    created = False
    if reservations.get_leave(db, user.id, day) is None:
        db.add(Leave(date=day, user_id=user.id, seat_id=user.designated_seat_id))
        if user.designated_seat_id:
            user.floater_leave_count = (user.floater_leave_count or 0) + 1
        created = True

    released = (
        db.query(Booking)
        .filter(Booking.user_id == user.id, Booking.date == day)
        .delete(synchronize_session="fetch")
    )
    db.query(SeatLock).filter(SeatLock.user_id == user.id, SeatLock.date == day).delete(
        synchronize_session="fetch"
    )

    if created:
        logger.info("User %s marked leave for %s (%d booking(s) released).", user.id, day, released)
    return created, released


def list_user_bookings(db: Session, user_id: str) -> List[Booking]:
    return (
        db.query(Booking)
        .filter(Booking.user_id == user_id)
        .order_by(Booking.date, Booking.seat_id)
        .all()
    )
