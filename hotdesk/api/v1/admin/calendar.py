from fastapi import APIRouter, Depends

from hotdesk.api.deps import get_current_admin_user, get_engine
from hotdesk.services.engine import BookingEngine
from hotdesk.schemas.user import User
from hotdesk.schemas.common import OperationResult
from hotdesk.schemas.calendar import BatchSchedule, HolidayToggle

router = APIRouter(prefix="/admin", tags=["Admin - Calendar"])


# ---------------------------------------------------------------------------
# Batch rotation
# ---------------------------------------------------------------------------


@router.get("/batch-schedule", response_model=BatchSchedule)
def get_batch_schedule(
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_admin_user),
):
    return engine.get_batch_schedule()


@router.put("/batch-schedule", response_model=OperationResult)
def replace_batch_schedule(
    data: BatchSchedule,
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_admin_user),
):
    """Replace the whole rotation table; it applies to the next request."""
    schedule = {batch: weeks.model_dump() for batch, weeks in data.schedule.items()}
    return engine.replace_batch_schedule(schedule)


# ---------------------------------------------------------------------------
# Holidays
# ---------------------------------------------------------------------------


@router.post("/holidays", response_model=OperationResult)
def toggle_holiday(
    data: HolidayToggle,
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_admin_user),
):
    return engine.toggle_holiday(data.date, data.is_holiday)
