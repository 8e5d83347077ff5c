import logging
from datetime import date, datetime, timedelta
from typing import Callable, Dict, List, Optional, Sequence

from hotdesk.core.config import settings
from hotdesk.core.security import get_password_hash, verify_password
from hotdesk.db.session import SeatStore
from hotdesk.schemas.booking import Booking as BookingSchema, BookingConfirmResponse, BookingList
from hotdesk.schemas.calendar import BatchSchedule
from hotdesk.schemas.common import OperationResult
from hotdesk.schemas.leave import Leave as LeaveSchema, LeaveList, LeaveResponse
from hotdesk.schemas.seat import SeatLockReleaseResponse, SeatLockResponse, SeatStateResponse
from hotdesk.schemas.user import User as UserSchema, UserList
from hotdesk.services import admin, bookings, catalog, locks, reservations, users
from hotdesk.services.policy import build_policy_summary
from hotdesk.services.projector import project_seats

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class BookingEngine:
    """
    Entry point for every seat-booking operation.

    Each call reads the clock once, runs inside a single store transaction
    (validation and mutation under one mutex) and returns API schemas, so no
    ORM object escapes the session it was loaded in.
    """

    def __init__(self, store: SeatStore, clock: Clock = datetime.now, lock_ttl: Optional[timedelta] = None):
        self.store = store
        self.clock = clock
        self.lock_ttl = lock_ttl or timedelta(seconds=settings.LOCK_TTL_SECONDS)

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    def register_user(
        self,
        name: str,
        email: str,
        password: str,
        batch: str,
        designated_seat_id: Optional[int] = None,
        role: str = "user",
    ) -> UserSchema:
        password_hash = get_password_hash(password)
        with self.store.transaction() as db:
            user = users.register_user(
                db, name, email, password_hash, batch, designated_seat_id, role
            )
            return UserSchema.model_validate(user)

    def authenticate(self, email: str, password: str) -> Optional[UserSchema]:
        with self.store.transaction() as db:
            user = users.find_by_email(db, email)
            if user is None:
                return None
            password_hash = user.password_hash
            found = UserSchema.model_validate(user)
        if not verify_password(password, password_hash):
            return None
        return found

    def get_user(self, user_id: str) -> UserSchema:
        with self.store.transaction() as db:
            return UserSchema.model_validate(users.get_user(db, user_id))

    def switch_batch(self, user_id: str, new_batch: str, day: Optional[date] = None) -> UserSchema:
        day = day or self.clock().date()
        with self.store.transaction() as db:
            user = users.switch_batch(db, users.get_user(db, user_id), new_batch, day)
            return UserSchema.model_validate(user)

    # ------------------------------------------------------------------
    # Seat state, locks, bookings, leave
    # ------------------------------------------------------------------

    def get_seat_state(self, day: date, user_id: str) -> SeatStateResponse:
        now = self.clock()
        with self.store.transaction() as db:
            user = users.get_user(db, user_id)
            return SeatStateResponse(
                date=day,
                seats=project_seats(db, day, now, user.id),
                policy=build_policy_summary(db, user, day),
            )

    def acquire_locks(self, user_id: str, day: date, seat_ids: Sequence[int]) -> SeatLockResponse:
        now = self.clock()
        with self.store.transaction() as db:
            user = users.get_user(db, user_id)
            locked, expires_at = locks.acquire_locks(db, user, day, seat_ids, now, self.lock_ttl)
        return SeatLockResponse(message="Seats locked", locked_seats=locked, locked_until=expires_at)

    def release_locks(self, user_id: str, day: date, seat_ids: Sequence[int]) -> SeatLockReleaseResponse:
        with self.store.transaction() as db:
            user = users.get_user(db, user_id)
            released = locks.release_locks(db, user, day, seat_ids)
        return SeatLockReleaseResponse(message="Seats unlocked", released_seats=released)

    def confirm_booking(self, user_id: str, day: date, seat_ids: Sequence[int]) -> BookingConfirmResponse:
        now = self.clock()
        with self.store.transaction() as db:
            user = users.get_user(db, user_id)
            booked = bookings.confirm_booking(db, user, day, seat_ids, now)
        return BookingConfirmResponse(message="Booking successful", booked_seats=booked)

    def cancel_booking(self, user_id: str, day: date, seat_ids: Sequence[int]) -> OperationResult:
        with self.store.transaction() as db:
            user = users.get_user(db, user_id)
            bookings.cancel_booking(db, user, day, seat_ids)
        return OperationResult(message="Booking cancelled")

    def mark_leave(self, user_id: str, day: date) -> LeaveResponse:
        with self.store.transaction() as db:
            user = users.get_user(db, user_id)
            created, released = bookings.mark_leave(db, user, day)
        return LeaveResponse(
            message="Leave recorded for this date",
            created=created,
            released_bookings=released,
        )

    def list_own_bookings(self, user_id: str) -> BookingList:
        with self.store.transaction() as db:
            rows = bookings.list_user_bookings(db, user_id)
            return BookingList(bookings=[BookingSchema.model_validate(b) for b in rows])

    def purge_expired_locks(self) -> int:
        now = self.clock()
        with self.store.transaction() as db:
            return reservations.purge_expired_locks(db, now)

    # ------------------------------------------------------------------
    # Administration
    # ------------------------------------------------------------------

    def reset_all(self) -> OperationResult:
        self.store.reset()
        return OperationResult(message="System reset to default configuration")

    def list_all_bookings(self) -> BookingList:
        with self.store.transaction() as db:
            rows = admin.list_all_bookings(db)
            return BookingList(bookings=[BookingSchema.model_validate(b) for b in rows])

    def force_cancel(self, day: date, seat_id: int) -> OperationResult:
        with self.store.transaction() as db:
            admin.force_cancel(db, day, seat_id)
        return OperationResult(message=f"Seat {seat_id} booking cleared for {day.isoformat()}")

    def get_batch_schedule(self) -> BatchSchedule:
        with self.store.transaction() as db:
            return BatchSchedule(schedule=catalog.batch_schedule(db))

    def replace_batch_schedule(self, schedule: Dict[str, Dict[str, List[str]]]) -> OperationResult:
        with self.store.transaction() as db:
            admin.replace_batch_schedule(db, schedule)
        return OperationResult(message="Batch schedule updated")

    def set_seat_type(self, seat_id: int, seat_type: str) -> OperationResult:
        with self.store.transaction() as db:
            admin.set_seat_type(db, seat_id, seat_type)
        return OperationResult(message=f"Seat {seat_id} converted to {seat_type}")

    def assign_designated_seat(self, user_id: str, seat_id: int) -> OperationResult:
        with self.store.transaction() as db:
            admin.assign_designated_seat(db, user_id, seat_id)
        return OperationResult(message=f"Seat {seat_id} assigned as designated seat to {user_id}")

    def toggle_holiday(self, day: date, is_holiday: bool = True) -> OperationResult:
        with self.store.transaction() as db:
            admin.toggle_holiday(db, day, is_holiday)
        return OperationResult(message="Holiday configuration updated")

    def list_leaves(self) -> LeaveList:
        with self.store.transaction() as db:
            return LeaveList(leaves=[LeaveSchema.model_validate(lv) for lv in admin.list_leaves(db)])

    def list_users(self) -> UserList:
        with self.store.transaction() as db:
            return UserList(users=[UserSchema.model_validate(u) for u in admin.list_users(db)])
