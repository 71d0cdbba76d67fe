"""Booking schemas."""

from datetime import datetime
from decimal import Decimal

from cinema_booking.models.payment import PaymentFailureReason, PaymentMethod
from cinema_booking.schemas.common import BaseSchema
from cinema_booking.schemas.movie import MovieResponse
from cinema_booking.schemas.seat import SeatResponse


class BookingResponse(BaseSchema):
    """Schema for booking response."""

    booking_id: str
    session_id: str
    movie: MovieResponse
    seats: list[SeatResponse]
    date: datetime
    time: str
    cinema_hall: str
    total_price: Decimal
    is_paid: bool = False
    payment_id: str | None = None


class CheckoutRequest(BaseSchema):
    """Schema for paying for a booking."""

    method: PaymentMethod = PaymentMethod.APPLE_PAY


class PaymentResponse(BaseSchema):
    """Schema for a successful payment."""

    payment_id: str
    booking_id: str
    method: PaymentMethod
    amount: Decimal
    processed_at: datetime


class PaymentFailureResponse(BaseSchema):
    """Schema for a failed payment."""

    reason: PaymentFailureReason
    message: str
