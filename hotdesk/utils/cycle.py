from datetime import date, timedelta
from typing import NamedTuple, Tuple

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
WEEK_TYPES = ("week1", "week2")


class CycleInfo(NamedTuple):
    weekday: str
    week_type: str
    start: date
    end: date


def weekday_name(day: date) -> str:
    return WEEKDAY_NAMES[day.weekday()]


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def week_type(day: date) -> str:
    """Odd ISO weeks are 'week1' of the rotation, even ones 'week2'."""
    return "week1" if day.isocalendar()[1] % 2 == 1 else "week2"


def cycle_bounds(day: date) -> Tuple[date, date]:
    """
    Return the inclusive (start, end) of the two-week cycle containing `day`.

    A cycle starts on the Monday of an odd ISO week and ends on the Sunday of
    the even week that follows it. ISO week 53 is followed by week 1 of the
    next year, which is odd again, so week 53 is a cycle of its own.
    """
    monday = day - timedelta(days=day.weekday())
    if week_type(day) == "week2":
        monday -= timedelta(days=7)

    next_monday = monday + timedelta(days=7)
    if week_type(next_monday) == "week1":
        return monday, monday + timedelta(days=6)
    return monday, monday + timedelta(days=13)


def describe(day: date) -> CycleInfo:
    start, end = cycle_bounds(day)
    return CycleInfo(weekday=weekday_name(day), week_type=week_type(day), start=start, end=end)
