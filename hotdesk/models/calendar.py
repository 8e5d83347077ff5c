from sqlalchemy import Column, String, Date
from hotdesk.db.session import Base


class BatchScheduleDay(Base):
    """One weekday a batch attends in one week of the two-week rotation."""

    __tablename__ = "batch_schedule_days"

    batch = Column(String(20), primary_key=True)
    week_type = Column(String(10), primary_key=True)  # week1, week2
    weekday = Column(String(3), primary_key=True)  # Mon .. Sun


class Holiday(Base):
    __tablename__ = "holidays"

    date = Column(Date, primary_key=True)
