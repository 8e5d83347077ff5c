from sqlalchemy import Column, String, Integer, Date, ForeignKey, UniqueConstraint
from hotdesk.db.session import Base


class Leave(Base):
    __tablename__ = "leaves"
    __table_args__ = (
        UniqueConstraint("date", "user_id", name="uq_leaves_date_user"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    seat_id = Column(Integer, nullable=True)  # designated seat at the time of leave
