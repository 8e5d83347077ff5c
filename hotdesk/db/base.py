from hotdesk.db.session import Base
from hotdesk.models.user import User
from hotdesk.models.seat import Seat
from hotdesk.models.booking import Booking, SeatLock
from hotdesk.models.leave import Leave
from hotdesk.models.calendar import BatchScheduleDay, Holiday
