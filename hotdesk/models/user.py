import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime
from hotdesk.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    batch = Column(String(20), nullable=False)  # batch1, batch2
    # Weak reference to seats.id, kept in sync with Seat.owner_user_id
    designated_seat_id = Column(Integer, nullable=True)
    floater_leave_count = Column(Integer, nullable=False, default=0)
    role = Column(String(20), nullable=False, default="user")  # user, admin
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
