"""Pydantic schemas for API request/response."""

from cinema_booking.schemas.booking import (
    BookingResponse,
    CheckoutRequest,
    PaymentFailureResponse,
    PaymentResponse,
)
from cinema_booking.schemas.movie import MovieResponse, ShowtimeResponse
from cinema_booking.schemas.seat import SeatResponse
from cinema_booking.schemas.session import (
    SelectionResponse,
    SessionCreate,
    SessionResponse,
)

__all__ = [
    "MovieResponse",
    "ShowtimeResponse",
    "SeatResponse",
    "SessionCreate",
    "SessionResponse",
    "SelectionResponse",
    "BookingResponse",
    "CheckoutRequest",
    "PaymentResponse",
    "PaymentFailureResponse",
]
