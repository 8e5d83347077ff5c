from typing import List, Optional
from pydantic import BaseModel
from datetime import date, datetime

from hotdesk.schemas.common import OperationResult


# --- Seat map (per date, per viewer) ---

class SeatView(BaseModel):
    seat_id: int
    row: str
    number: int
    type: str  # designated, floater
    assigned_to: Optional[str] = None
    status: str  # available, locked, occupied
    booked_by: Optional[str] = None
    locked_by: Optional[str] = None
    lock_expiry: Optional[datetime] = None
    effective_type: str
    is_user_designated_seat: bool = False


class PolicySummary(BaseModel):
    is_weekend_or_holiday: bool
    is_batch_day: bool
    can_use_designated_today: bool
    is_floater_only_day: bool
    attendance_count: int
    attendance_required: int
    on_leave: bool
    week_type: str
    cycle_start: date
    cycle_end: date
    warnings: List[str] = []


class SeatStateResponse(BaseModel):
    date: date
    seats: List[SeatView]
    policy: PolicySummary


# --- Seat selection (lock / unlock / book / cancel) ---

class SeatSelectionRequest(BaseModel):
    date: date
    seat_ids: List[int] = []


class SeatLockResponse(OperationResult):
    locked_seats: List[int]
    locked_until: datetime


class SeatLockReleaseResponse(OperationResult):
    released_seats: List[int]


# --- Admin seat configuration ---

class SeatTypeUpdate(BaseModel):
    type: str


class SeatAssignment(BaseModel):
    user_id: str
