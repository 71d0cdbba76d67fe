"""Services package."""

from cinema_booking.services.booking_service import BookingFactory
from cinema_booking.services.movie_service import MovieService
from cinema_booking.services.payment_service import (
    CheckoutService,
    PaymentError,
    PaymentGateway,
    SimulatedPaymentGateway,
)
from cinema_booking.services.seat_allocation_service import (
    SeatAllocationEngine,
    SeatAllocationError,
    SeatNotFoundError,
    SelectionSnapshot,
)
from cinema_booking.services.seat_map_service import SeatMapError, SeatMapGenerator
from cinema_booking.services.showtime_service import ShowtimeService
from cinema_booking.services.ticket_service import TicketQuantity

__all__ = [
    "BookingFactory",
    "MovieService",
    "SeatMapGenerator",
    "SeatMapError",
    "SeatAllocationEngine",
    "SeatAllocationError",
    "SeatNotFoundError",
    "SelectionSnapshot",
    "ShowtimeService",
    "TicketQuantity",
    "PaymentGateway",
    "SimulatedPaymentGateway",
    "CheckoutService",
    "PaymentError",
]
