from typing import List
from pydantic import BaseModel
from datetime import date, datetime

from hotdesk.schemas.common import OperationResult


class Booking(BaseModel):
    date: date
    seat_id: int
    user_id: str
    booked_at: datetime

    class Config:
        from_attributes = True


# Booking confirm response (POST /bookings)
class BookingConfirmResponse(OperationResult):
    booked_seats: List[int]


class BookingList(BaseModel):
    bookings: List[Booking]


# Admin force-cancel (POST /admin/bookings/force-cancel)
class ForceCancelRequest(BaseModel):
    date: date
    seat_id: int
