import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from hotdesk.core.exceptions import ConflictError, NotFoundError, PolicyViolation, ValidationError
from hotdesk.models.booking import Booking
from hotdesk.models.seat import Seat
from hotdesk.models.user import User
from hotdesk.services.admin import assign_designated_seat

logger = logging.getLogger(__name__)


def register_user(
    db: Session,
    name: str,
    email: str,
    password_hash: str,
    batch: str,
    designated_seat_id: Optional[int] = None,
    role: str = "user",
) -> User:
    if db.query(User).filter(User.email == email).first():
        raise ConflictError("Email is already registered")
    if designated_seat_id is not None and db.get(Seat, designated_seat_id) is None:
        raise ValidationError("Invalid designated_seat_id")

    user = User(
        name=name,
        email=email,
        password_hash=password_hash,
        batch=batch,
        floater_leave_count=0,
        role=role,
    )
    db.add(user)
    db.flush()

    if designated_seat_id is not None:
        assign_designated_seat(db, user.id, designated_seat_id)

    logger.info("Registered %s %s in %s.", role, user.id, batch)
    return user


def find_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def switch_batch(db: Session, user: User, new_batch: str, day: date) -> User:
    """Move the user to another batch unless they hold a booking on `day`."""
    active = (
        db.query(Booking)
        .filter(Booking.user_id == user.id, Booking.date == day)
        .first()
    )
    if active is not None:
        raise PolicyViolation("Cannot switch batch while you have an active booking for this date")
    user.batch = new_batch
    logger.info("User %s switched to %s.", user.id, new_batch)
    return user
