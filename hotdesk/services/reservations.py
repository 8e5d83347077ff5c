"""
Reservation store and leave ledger lookups.

Every lookup is keyed by value, (date, seat_id) or (date, user_id), and
served by the unique indexes on the underlying tables.
"""
from datetime import date, datetime
from typing import Dict, Iterable, Optional, Set

from sqlalchemy.orm import Session

from hotdesk.models.booking import Booking, SeatLock
from hotdesk.models.leave import Leave


def bookings_for(db: Session, day: date, seat_ids: Optional[Iterable[int]] = None) -> Dict[int, Booking]:
    query = db.query(Booking).filter(Booking.date == day)
    if seat_ids is not None:
        query = query.filter(Booking.seat_id.in_(list(seat_ids)))
    return {b.seat_id: b for b in query.all()}


def locks_for(db: Session, day: date, seat_ids: Optional[Iterable[int]] = None) -> Dict[int, SeatLock]:
    """All lock rows for the date, live or stale; callers decide liveness."""
    query = db.query(SeatLock).filter(SeatLock.date == day)
    if seat_ids is not None:
        query = query.filter(SeatLock.seat_id.in_(list(seat_ids)))
    return {lk.seat_id: lk for lk in query.all()}


def live_locks_for(db: Session, day: date, now: datetime) -> Dict[int, SeatLock]:
    return {
        lk.seat_id: lk
        for lk in db.query(SeatLock).filter(SeatLock.date == day, SeatLock.expires_at > now).all()
    }


def purge_expired_locks(db: Session, now: datetime, day: Optional[date] = None) -> int:
    query = db.query(SeatLock).filter(SeatLock.expires_at <= now)
    if day is not None:
        query = query.filter(SeatLock.date == day)
    return query.delete(synchronize_session="fetch")


def delete_locks(db: Session, day: date, seat_ids: Iterable[int], user_id: Optional[str] = None) -> int:
    query = db.query(SeatLock).filter(SeatLock.date == day, SeatLock.seat_id.in_(list(seat_ids)))
    if user_id is not None:
        query = query.filter(SeatLock.user_id == user_id)
    return query.delete(synchronize_session="fetch")


def attended_dates(db: Session, user_id: str, start: date, end: date) -> Set[date]:
    rows = (
        db.query(Booking.date)
        .filter(Booking.user_id == user_id, Booking.date >= start, Booking.date <= end)
        .distinct()
        .all()
    )
    return {row[0] for row in rows}


# ---------------------------------------------------------------------------
# Leave ledger
# ---------------------------------------------------------------------------


def get_leave(db: Session, user_id: str, day: date) -> Optional[Leave]:
    return db.query(Leave).filter(Leave.user_id == user_id, Leave.date == day).first()


def is_on_leave(db: Session, user_id: str, day: date) -> bool:
    return get_leave(db, user_id, day) is not None


def users_on_leave(db: Session, day: date) -> Set[str]:
    return {row[0] for row in db.query(Leave.user_id).filter(Leave.date == day).all()}
