from fastapi import APIRouter, Depends

from hotdesk.api.deps import get_current_user, get_engine
from hotdesk.services.engine import BookingEngine
from hotdesk.schemas.user import User
from hotdesk.schemas.common import OperationResult
from hotdesk.schemas.seat import SeatSelectionRequest
from hotdesk.schemas.booking import BookingConfirmResponse

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.post("/", response_model=BookingConfirmResponse)
def confirm_booking(
    body: SeatSelectionRequest,
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_user),
):
    """
    Confirm a booking for up to five seats on one date.
    - Every seat must be free and not held by someone else.
    - Bookings for tomorrow open at 3 PM today.
    - Either every seat is booked or none is.
    """
    return engine.confirm_booking(current_user.id, body.date, body.seat_ids)


@router.post("/cancel", response_model=OperationResult)
def cancel_booking(
    body: SeatSelectionRequest,
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_user),
):
    """Cancel the caller's own bookings for the given seats and date."""
    return engine.cancel_booking(current_user.id, body.date, body.seat_ids)
