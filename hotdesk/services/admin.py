import logging
from datetime import date
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from hotdesk.core.exceptions import NotFoundError, ValidationError
from hotdesk.db.init_db import write_batch_schedule
from hotdesk.models.booking import Booking, SeatLock
from hotdesk.models.calendar import Holiday
from hotdesk.models.leave import Leave
from hotdesk.models.seat import Seat, SeatType
from hotdesk.models.user import User
from hotdesk.utils.cycle import WEEK_TYPES, WEEKDAY_NAMES

logger = logging.getLogger(__name__)

BATCHES = ("batch1", "batch2")


def _get_seat(db: Session, seat_id: int) -> Seat:
    seat = db.get(Seat, seat_id)
    if seat is None:
        logger.warning("Admin referenced unknown seat %s.", seat_id)
        raise NotFoundError("Seat not found")
    return seat


def _get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if user is None:
        logger.warning("Admin referenced unknown user %s.", user_id)
        raise NotFoundError("User not found")
    return user


def _unlink_owner(db: Session, seat: Seat) -> None:
    if seat.owner_user_id:
        owner = db.get(User, seat.owner_user_id)
        if owner is not None and owner.designated_seat_id == seat.id:
            owner.designated_seat_id = None
    seat.owner_user_id = None


def list_all_bookings(db: Session) -> List[Booking]:
    return db.query(Booking).order_by(Booking.date, Booking.seat_id).all()


def list_leaves(db: Session) -> List[Leave]:
    return db.query(Leave).order_by(Leave.date, Leave.user_id).all()


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.created_at, User.email).all()


def force_cancel(db: Session, day: date, seat_id: int) -> int:
    """Clear whatever booking and lock exist on (day, seat_id)."""
    _get_seat(db, seat_id)
    removed = (
        db.query(Booking)
        .filter(Booking.date == day, Booking.seat_id == seat_id)
        .delete(synchronize_session="fetch")
    )
    db.query(SeatLock).filter(SeatLock.date == day, SeatLock.seat_id == seat_id).delete(
        synchronize_session="fetch"
    )
    logger.info("Admin force-cancelled seat %s on %s (%d booking(s) removed).", seat_id, day, removed)
    return removed


def replace_batch_schedule(db: Session, schedule: Dict[str, Dict[str, List[str]]]) -> None:
    for batch, weeks in schedule.items():
        if batch not in BATCHES:
            raise ValidationError(f'Unknown batch "{batch}"')
        for week_type, days in weeks.items():
            if week_type not in WEEK_TYPES:
                raise ValidationError(f'Unknown rotation week "{week_type}"')
            for day in days:
                if day not in WEEKDAY_NAMES:
                    raise ValidationError(f'Unknown weekday "{day}"')
    write_batch_schedule(db, schedule)
    logger.info("Admin replaced the batch schedule.")


def set_seat_type(db: Session, seat_id: int, seat_type: str) -> Seat:
    if seat_type not in (SeatType.designated.value, SeatType.floater.value):
        raise ValidationError('type must be "designated" or "floater"')
    seat = _get_seat(db, seat_id)
    seat.seat_type = seat_type
    if seat_type == SeatType.floater.value:
        _unlink_owner(db, seat)
    logger.info("Admin converted seat %s to %s.", seat_id, seat_type)
    return seat


def assign_designated_seat(db: Session, user_id: str, seat_id: int) -> Seat:
    """Make `seat_id` the user's designated seat, keeping one seat per user."""
    seat = _get_seat(db, seat_id)
    user = _get_user(db, user_id)

    if seat.owner_user_id and seat.owner_user_id != user.id:
        _unlink_owner(db, seat)
    if user.designated_seat_id and user.designated_seat_id != seat.id:
        previous = db.get(Seat, user.designated_seat_id)
        if previous is not None and previous.owner_user_id == user.id:
            previous.owner_user_id = None

    seat.seat_type = SeatType.designated.value
    seat.owner_user_id = user.id
    user.designated_seat_id = seat.id
    logger.info("Admin assigned seat %s as designated seat of %s.", seat_id, user_id)
    return seat


def toggle_holiday(db: Session, day: date, is_holiday: bool = True) -> None:
    existing: Optional[Holiday] = db.get(Holiday, day)
    if is_holiday and existing is None:
        db.add(Holiday(date=day))
    elif not is_holiday and existing is not None:
        db.delete(existing)
    logger.info("Admin set holiday %s to %s.", day, is_holiday)
