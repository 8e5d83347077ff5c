from fastapi import APIRouter, Depends

from hotdesk.api.deps import get_current_user, get_engine
from hotdesk.services.engine import BookingEngine
from hotdesk.schemas.user import User, BatchSwitch
from hotdesk.schemas.booking import BookingList

router = APIRouter(prefix="/me", tags=["Me"])


@router.get("/", response_model=User)
def get_me(current_user: User = Depends(get_current_user)):
    """Return the authenticated user's profile."""
    return current_user


@router.patch("/batch", response_model=User)
def switch_batch(
    body: BatchSwitch,
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_user),
):
    """
    Move to the other batch. Refused while the user holds a booking on
    `effective_date` (defaults to today).
    """
    return engine.switch_batch(current_user.id, body.new_batch, body.effective_date)


@router.get("/bookings", response_model=BookingList)
def list_my_bookings(
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_user),
):
    """Return every booking of the authenticated user, by date and seat."""
    return engine.list_own_bookings(current_user.id)
