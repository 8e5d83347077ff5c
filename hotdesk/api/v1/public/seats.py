from datetime import date

from fastapi import APIRouter, Depends, Query

from hotdesk.api.deps import get_current_user, get_engine
from hotdesk.services.engine import BookingEngine
from hotdesk.schemas.user import User
from hotdesk.schemas.seat import (
    SeatStateResponse,
    SeatSelectionRequest,
    SeatLockResponse,
    SeatLockReleaseResponse,
)

router = APIRouter(prefix="/seats", tags=["Seats"])


# ---------------------------------------------------------------------------
# Seat map for a date
# ---------------------------------------------------------------------------


@router.get("/", response_model=SeatStateResponse)
def get_seat_state(
    date: date = Query(..., description="Calendar date (YYYY-MM-DD)"),
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_user),
):
    """
    Status of every seat for the date (available, locked, occupied) plus the
    caller's policy summary. Expired locks are never reported as locked.
    """
    return engine.get_seat_state(date, current_user.id)


# ---------------------------------------------------------------------------
# Seat locking
# ---------------------------------------------------------------------------


@router.post("/lock", response_model=SeatLockResponse)
def lock_seats(
    body: SeatSelectionRequest,
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_user),
):
    """
    Hold the selected seats for two minutes. Re-locking seats the caller
    already holds extends the hold. All seats are locked or none.
    """
    return engine.acquire_locks(current_user.id, body.date, body.seat_ids)


@router.post("/unlock", response_model=SeatLockReleaseResponse)
def unlock_seats(
    body: SeatSelectionRequest,
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_user),
):
    """Release the caller's holds on the selected seats."""
    return engine.release_locks(current_user.id, body.date, body.seat_ids)
