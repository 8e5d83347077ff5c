from typing import List, Optional
from pydantic import BaseModel
from datetime import date

from hotdesk.schemas.common import OperationResult


class LeaveRequest(BaseModel):
    date: date


class Leave(BaseModel):
    date: date
    user_id: str
    seat_id: Optional[int] = None

    class Config:
        from_attributes = True


class LeaveResponse(OperationResult):
    created: bool
    released_bookings: int = 0


class LeaveList(BaseModel):
    leaves: List[Leave]
