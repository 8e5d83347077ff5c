import logging
from typing import Dict, List

from sqlalchemy.orm import Session
from hotdesk.core.config import settings
from hotdesk.models.user import User
from hotdesk.models.seat import Seat, SeatType
from hotdesk.models.booking import Booking, SeatLock
from hotdesk.models.leave import Leave
from hotdesk.models.calendar import BatchScheduleDay, Holiday

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Two-week batch rotation: week1 = odd ISO week, week2 = even ISO week
DEFAULT_BATCH_SCHEDULE: Dict[str, Dict[str, List[str]]] = {
    "batch1": {"week1": ["Mon", "Tue", "Wed"], "week2": ["Thu", "Fri"]},
    "batch2": {"week1": ["Thu", "Fri"], "week2": ["Mon", "Tue", "Wed"]},
}


def default_seats() -> List[Seat]:
    """Floor layout: the last FLOATER_SEAT_COUNT seats are floaters, the rest designated."""
    floater_start = settings.TOTAL_SEATS - settings.FLOATER_SEAT_COUNT + 1
    return [
        Seat(
            id=seat_id,
            seat_type=(SeatType.floater if seat_id >= floater_start else SeatType.designated).value,
            owner_user_id=None,
        )
        for seat_id in range(1, settings.TOTAL_SEATS + 1)
    ]


def write_batch_schedule(db: Session, schedule: Dict[str, Dict[str, List[str]]]) -> None:
    db.query(BatchScheduleDay).delete(synchronize_session="fetch")
    for batch, weeks in schedule.items():
        for week_type, days in weeks.items():
            for weekday in dict.fromkeys(days):
                db.add(BatchScheduleDay(batch=batch, week_type=week_type, weekday=weekday))


def seed_defaults(db: Session) -> None:
    """Load the default catalog and batch schedule into an empty store."""
    if db.query(Seat).first() is None:
        db.add_all(default_seats())
        logger.info("Seeded seat catalog with %d seats.", settings.TOTAL_SEATS)
    if db.query(BatchScheduleDay).first() is None:
        write_batch_schedule(db, DEFAULT_BATCH_SCHEDULE)
        logger.info("Seeded default batch schedule.")


def reset_defaults(db: Session) -> None:
    """Drop every booking, lock, leave and holiday and restore the default layout."""
    db.query(Booking).delete(synchronize_session=False)
    db.query(SeatLock).delete(synchronize_session=False)
    db.query(Leave).delete(synchronize_session=False)
    db.query(Holiday).delete(synchronize_session=False)
    db.query(Seat).delete(synchronize_session=False)
    db.flush()
    db.expunge_all()

    db.add_all(default_seats())
    write_batch_schedule(db, DEFAULT_BATCH_SCHEDULE)

    # Users survive a reset but lose their seat links and leave tallies
    db.query(User).update(
        {"designated_seat_id": None, "floater_leave_count": 0},
        synchronize_session=False,
    )
    logger.info("Store reset to default configuration.")
