from fastapi import APIRouter, Depends

from hotdesk.api.deps import get_current_admin_user, get_engine
from hotdesk.services.engine import BookingEngine
from hotdesk.schemas.user import User, UserList
from hotdesk.schemas.common import OperationResult
from hotdesk.schemas.leave import LeaveList

router = APIRouter(prefix="/admin", tags=["Admin - System"])


@router.post("/reset", response_model=OperationResult)
def reset_all(
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_admin_user),
):
    """Drop bookings, locks, leaves and holidays and restore the default layout."""
    return engine.reset_all()


@router.get("/leaves", response_model=LeaveList)
def list_leaves(
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_admin_user),
):
    return engine.list_leaves()


@router.get("/users", response_model=UserList)
def list_users(
    engine: BookingEngine = Depends(get_engine),
    current_user: User = Depends(get_current_admin_user),
):
    """All users with their batch, designated seat and floater leave count."""
    return engine.list_users()
