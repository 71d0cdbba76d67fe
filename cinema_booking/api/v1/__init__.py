"""API v1 routers package."""

from cinema_booking.api.v1.bookings import router as bookings_router
from cinema_booking.api.v1.movies import router as movies_router
from cinema_booking.api.v1.sessions import router as sessions_router

__all__ = [
    "movies_router",
    "sessions_router",
    "bookings_router",
]
