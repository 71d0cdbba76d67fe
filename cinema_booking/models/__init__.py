"""Domain models."""

from cinema_booking.models.booking import Booking
from cinema_booking.models.movie import Movie
from cinema_booking.models.payment import (
    PaymentFailureReason,
    PaymentMethod,
    PaymentReceipt,
)
from cinema_booking.models.seat import Seat, SeatMap, SeatStatus

__all__ = [
    "Movie",
    "Seat",
    "SeatMap",
    "SeatStatus",
    "Booking",
    "PaymentMethod",
    "PaymentFailureReason",
    "PaymentReceipt",
]
