from fastapi import APIRouter, Depends

from hotdesk.api.deps import get_current_admin_user, get_engine
from hotdesk.services.engine import BookingEngine
from hotdesk.schemas.user import User
from hotdesk.schemas.common import OperationResult
from hotdesk.schemas.booking import BookingList, ForceCancelRequest

router = APIRouter(prefix="/admin/bookings", tags=["Admin - Bookings"])


@router.get("/", response_model=BookingList)
def list_all_bookings(
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_admin_user),
):
    """Return every booking across all dates and seats."""
    return engine.list_all_bookings()


@router.post("/force-cancel", response_model=OperationResult)
def force_cancel(
    body: ForceCancelRequest,
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_admin_user),
):
    """Clear the booking and any lock on one seat for one date."""
    return engine.force_cancel(body.date, body.seat_id)
