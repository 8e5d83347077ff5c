from sqlalchemy import Column, String, Integer, Date, DateTime, ForeignKey, Index, UniqueConstraint
from hotdesk.db.session import Base


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (
        UniqueConstraint("date", "seat_id", name="uq_bookings_date_seat"),
        Index("ix_bookings_date_user", "date", "user_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False)
    seat_id = Column(Integer, ForeignKey("seats.id"), nullable=False)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    booked_at = Column(DateTime, nullable=False)


class SeatLock(Base):
    __tablename__ = "seat_locks"
    __table_args__ = (
        # One lock row per key; a stale row is inert and gets replaced.
        UniqueConstraint("date", "seat_id", name="uq_seat_locks_date_seat"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False)
    seat_id = Column(Integer, ForeignKey("seats.id"), nullable=False)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    expires_at = Column(DateTime, nullable=False, index=True)

    def is_live(self, now) -> bool:
        return self.expires_at > now
