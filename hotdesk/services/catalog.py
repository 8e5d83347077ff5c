from datetime import date
from typing import Dict, Iterable, List

from sqlalchemy.orm import Session

from hotdesk.models.seat import Seat
from hotdesk.models.calendar import BatchScheduleDay, Holiday
from hotdesk.utils.cycle import is_weekend, week_type, weekday_name


def all_seats(db: Session) -> List[Seat]:
    return db.query(Seat).order_by(Seat.id).all()


def seats_by_id(db: Session, seat_ids: Iterable[int]) -> Dict[int, Seat]:
    ids = list(seat_ids)
    if not ids:
        return {}
    return {s.id: s for s in db.query(Seat).filter(Seat.id.in_(ids)).all()}


def is_holiday(db: Session, day: date) -> bool:
    return db.get(Holiday, day) is not None


def is_weekend_or_holiday(db: Session, day: date) -> bool:
    return is_weekend(day) or is_holiday(db, day)


def batch_schedule(db: Session) -> Dict[str, Dict[str, List[str]]]:
    """Return the rotation table as {batch: {week1: [...], week2: [...]}}."""
    schedule: Dict[str, Dict[str, List[str]]] = {}
    rows = db.query(BatchScheduleDay).all()
    for row in rows:
        weeks = schedule.setdefault(row.batch, {"week1": [], "week2": []})
        weeks.setdefault(row.week_type, []).append(row.weekday)
    order = {"Mon": 0, "Tue": 1, "Wed": 2, "Thu": 3, "Fri": 4, "Sat": 5, "Sun": 6}
    for weeks in schedule.values():
        for days in weeks.values():
            days.sort(key=lambda d: order.get(d, 7))
    return schedule


def is_batch_scheduled(db: Session, batch: str, day: date) -> bool:
    return (
        db.query(BatchScheduleDay)
        .filter(
            BatchScheduleDay.batch == batch,
            BatchScheduleDay.week_type == week_type(day),
            BatchScheduleDay.weekday == weekday_name(day),
        )
        .first()
        is not None
    )
