from hotdesk.schemas.common import OperationResult, ErrorResponse
from hotdesk.schemas.user import User, UserCreate, AdminCreate, BatchSwitch, UserList, Token
from hotdesk.schemas.seat import (
    SeatView, PolicySummary, SeatStateResponse, SeatSelectionRequest,
    SeatLockResponse, SeatLockReleaseResponse, SeatTypeUpdate, SeatAssignment,
)
from hotdesk.schemas.booking import Booking, BookingConfirmResponse, BookingList, ForceCancelRequest
from hotdesk.schemas.leave import Leave, LeaveRequest, LeaveResponse, LeaveList
from hotdesk.schemas.calendar import BatchWeeks, BatchSchedule, HolidayToggle
