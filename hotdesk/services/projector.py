from datetime import date, datetime
from typing import List

from sqlalchemy.orm import Session

from hotdesk.models.seat import SeatType
from hotdesk.schemas.seat import SeatView
from hotdesk.services import catalog, reservations

SEATS_PER_ROW = 10


def project_seats(db: Session, day: date, now: datetime, viewer_id: str) -> List[SeatView]:
    """
    Derive the status of every seat for a date as seen by `viewer_id`.

    A booking wins over a live lock, a live lock over availability. Locks
    whose expiry is at or before `now` are ignored. Never cache the result:
    lock liveness depends on the wall clock.
    """
    bookings = reservations.bookings_for(db, day)
    locks = reservations.live_locks_for(db, day, now)
    away = reservations.users_on_leave(db, day)

    views = []
    for index, seat in enumerate(catalog.all_seats(db)):
        booking = bookings.get(seat.id)
        lock = locks.get(seat.id)

        status = "available"
        booked_by = locked_by = lock_expiry = None
        if booking:
            status = "occupied"
            booked_by = booking.user_id
        elif lock:
            status = "locked"
            locked_by = lock.user_id
            lock_expiry = lock.expires_at

        effective_type = seat.seat_type
        if seat.is_designated and seat.owner_user_id in away:
            effective_type = SeatType.floater.value

        views.append(SeatView(
            seat_id=seat.id,
            row=chr(ord("A") + index // SEATS_PER_ROW),
            number=index % SEATS_PER_ROW + 1,
            type=seat.seat_type,
            assigned_to=seat.owner_user_id,
            status=status,
            booked_by=booked_by,
            locked_by=locked_by,
            lock_expiry=lock_expiry,
            effective_type=effective_type,
            is_user_designated_seat=bool(
                seat.is_designated and seat.owner_user_id and seat.owner_user_id == viewer_id
            ),
        ))
    return views
