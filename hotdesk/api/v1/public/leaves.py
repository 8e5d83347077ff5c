from fastapi import APIRouter, Depends

from hotdesk.api.deps import get_current_user, get_engine
from hotdesk.services.engine import BookingEngine
from hotdesk.schemas.user import User
from hotdesk.schemas.leave import LeaveRequest, LeaveResponse

router = APIRouter(prefix="/leaves", tags=["Leave"])


@router.post("/", response_model=LeaveResponse)
def mark_leave(
    body: LeaveRequest,
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_user),
):
    """
    Mark the caller away for a date. Their bookings for the date are
    cancelled and their designated seat becomes a floater for that day.
    Marking the same date twice has no further effect.
    """
    return engine.mark_leave(current_user.id, body.date)
