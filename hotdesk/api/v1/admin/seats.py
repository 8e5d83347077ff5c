from fastapi import APIRouter, Depends

from hotdesk.api.deps import get_current_admin_user, get_engine
from hotdesk.services.engine import BookingEngine
from hotdesk.schemas.user import User
from hotdesk.schemas.common import OperationResult
from hotdesk.schemas.seat import SeatTypeUpdate, SeatAssignment

router = APIRouter(prefix="/admin/seats", tags=["Admin - Seats"])


@router.patch("/{seat_id}/type", response_model=OperationResult)
def set_seat_type(
    seat_id: int,
    data: SeatTypeUpdate,
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_admin_user),
):
    """Convert a seat between designated and floater. Floaters lose their owner."""
    return engine.set_seat_type(seat_id, data.type)


@router.post("/{seat_id}/assign", response_model=OperationResult)
def assign_seat(
    seat_id: int,
    data: SeatAssignment,
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_admin_user),
):
    """Make the seat the designated seat of a user."""
    return engine.assign_designated_seat(data.user_id, seat_id)
