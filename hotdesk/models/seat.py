import enum
from sqlalchemy import Column, String, Integer, ForeignKey
from hotdesk.db.session import Base


class SeatType(str, enum.Enum):
    designated = "designated"
    floater = "floater"


class Seat(Base):
    __tablename__ = "seats"

    id = Column(Integer, primary_key=True, autoincrement=False)
    seat_type = Column(String(20), nullable=False, default=SeatType.floater.value)
    owner_user_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True)

    @property
    def is_designated(self) -> bool:
        return self.seat_type == SeatType.designated.value
