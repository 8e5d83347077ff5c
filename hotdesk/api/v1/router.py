from fastapi import APIRouter

# Auth
from hotdesk.api.v1.public.auth import router as auth_router

# Public: profile, seat map, locks, bookings, leave
from hotdesk.api.v1.public.me import router as me_router
from hotdesk.api.v1.public.seats import router as seats_router
from hotdesk.api.v1.public.bookings import router as bookings_router
from hotdesk.api.v1.public.leaves import router as leaves_router

# Admin
from hotdesk.api.v1.admin.bookings import router as admin_bookings_router
from hotdesk.api.v1.admin.seats import router as admin_seats_router
from hotdesk.api.v1.admin.calendar import router as admin_calendar_router
from hotdesk.api.v1.admin.system import router as admin_system_router

api_router = APIRouter()

# --- Auth ---
api_router.include_router(auth_router)

# --- Public ---
api_router.include_router(me_router)
api_router.include_router(seats_router)
api_router.include_router(bookings_router)
api_router.include_router(leaves_router)

# --- Admin ---
api_router.include_router(admin_bookings_router)
api_router.include_router(admin_seats_router)
api_router.include_router(admin_calendar_router)
api_router.include_router(admin_system_router)
