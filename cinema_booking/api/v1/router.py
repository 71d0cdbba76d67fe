"""API v1 main router."""

from fastapi import APIRouter

from cinema_booking.api.v1.bookings import router as bookings_router
from cinema_booking.api.v1.movies import router as movies_router
from cinema_booking.api.v1.sessions import router as sessions_router

router = APIRouter(prefix="/v1")

router.include_router(movies_router, prefix="/movies", tags=["Movies"])
router.include_router(sessions_router, prefix="/sessions", tags=["Sessions"])
router.include_router(bookings_router, prefix="/bookings", tags=["Bookings"])
