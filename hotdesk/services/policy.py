from datetime import date, datetime, timedelta
from typing import Dict, List, Sequence

from sqlalchemy.orm import Session

from hotdesk.core.config import settings
from hotdesk.core.exceptions import PolicyViolation, ValidationError
from hotdesk.models.seat import Seat
from hotdesk.models.user import User
from hotdesk.schemas.seat import PolicySummary
from hotdesk.services import catalog, reservations
from hotdesk.utils.cycle import describe


def validate_seat_ids(db: Session, seat_ids: Sequence[int], max_seats: int = 0) -> Dict[int, Seat]:
    """Check the selection is non-empty, duplicate-free and names known seats."""
    if not seat_ids:
        raise ValidationError("seat_ids must be a non-empty list")
    if max_seats and len(seat_ids) > max_seats:
        raise ValidationError(f"You can book a maximum of {max_seats} seats per booking")

    seen = set()
    for seat_id in seat_ids:
        if seat_id in seen:
            raise ValidationError(f"Seat {seat_id} is listed more than once")
        seen.add(seat_id)

    seats = catalog.seats_by_id(db, seat_ids)
    for seat_id in seat_ids:
        if seat_id not in seats:
            raise ValidationError(f"Seat {seat_id} does not exist")
    return seats


def validate_selection(
    db: Session,
    user: User,
    day: date,
    seat_ids: Sequence[int],
    now: datetime,
    confirming: bool = False,
) -> Dict[int, Seat]:
    """
    Run the booking rules for a seat selection, stopping at the first failure.

    The same pass backs both seat locking and booking confirmation; only
    confirmation applies the per-booking seat cap and the rule that bookings
    for tomorrow open at ADVANCE_BOOKING_HOUR today. Returns the selected
    seats keyed by id.
    """
    seats = validate_seat_ids(
        db, seat_ids, settings.MAX_SEATS_PER_BOOKING if confirming else 0
    )

    if catalog.is_weekend_or_holiday(db, day):
        raise PolicyViolation("Booking is not allowed on weekends or holidays.")

    if reservations.is_on_leave(db, user.id, day):
        raise PolicyViolation("You have marked leave for this date. Booking is not allowed.")

    if confirming and day == now.date() + timedelta(days=1):
        if now.hour < settings.ADVANCE_BOOKING_HOUR:
            raise PolicyViolation(
                "Advance booking for tomorrow opens after "
                f"{_hour_label(settings.ADVANCE_BOOKING_HOUR)} today."
            )

    is_batch_day = None
    for seat_id in seat_ids:
        seat = seats[seat_id]
        if not seat.is_designated or not seat.owner_user_id:
            continue

        # Owner away: the seat is a floater for everyone that day
        if reservations.is_on_leave(db, seat.owner_user_id, day):
            continue

        if seat.owner_user_id != user.id:
            raise PolicyViolation(f"Seat {seat_id} is a designated seat and not assigned to you.")

        if is_batch_day is None:
            is_batch_day = catalog.is_batch_scheduled(db, user.batch, day)
        if not is_batch_day:
            raise PolicyViolation(
                "Your designated seat can only be booked on your scheduled batch days."
            )

    return seats


def build_policy_summary(db: Session, user: User, day: date) -> PolicySummary:
    info = describe(day)
    weekend_or_holiday = catalog.is_weekend_or_holiday(db, day)
    is_batch_day = catalog.is_batch_scheduled(db, user.batch, day)
    is_floater_only_day = not is_batch_day and not weekend_or_holiday

    attendance_count = len(reservations.attended_dates(db, user.id, info.start, info.end))
    attendance_required = settings.ATTENDANCE_REQUIRED
    on_leave = reservations.is_on_leave(db, user.id, day)

    warnings: List[str] = []
    if weekend_or_holiday:
        warnings.append("Booking disabled on weekends and holidays.")
    elif is_floater_only_day:
        warnings.append("Your batch is not scheduled today. Only floater seats are allowed.")
    if attendance_count < attendance_required:
        warnings.append(
            f"You have attended {attendance_count} days in this 2-week cycle. "
            f"Minimum required: {attendance_required}."
        )
    if on_leave:
        warnings.append("You have marked leave for this date. Booking is blocked.")

    return PolicySummary(
        is_weekend_or_holiday=weekend_or_holiday,
        is_batch_day=is_batch_day,
        can_use_designated_today=is_batch_day,
        is_floater_only_day=is_floater_only_day,
        attendance_count=attendance_count,
        attendance_required=attendance_required,
        on_leave=on_leave,
        week_type=info.week_type,
        cycle_start=info.start,
        cycle_end=info.end,
        warnings=warnings,
    )


def _hour_label(hour: int) -> str:
    if hour == 0:
        return "12 AM"
    if hour < 12:
        return f"{hour} AM"
    if hour == 12:
        return "12 PM"
    return f"{hour - 12} PM"
