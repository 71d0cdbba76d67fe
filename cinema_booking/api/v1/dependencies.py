"""API dependencies."""

from typing import Annotated

from fastapi import Depends

from cinema_booking.services.movie_service import MovieService
from cinema_booking.services.payment_service import (
    PaymentGateway,
    SimulatedPaymentGateway,
)
from cinema_booking.services.seat_map_service import SeatMapGenerator
from cinema_booking.services.showtime_service import ShowtimeService
from cinema_booking.session_store import SessionStore, get_session_store

_movie_service = MovieService()
_showtime_service = ShowtimeService()
_payment_gateway: PaymentGateway | None = None


def get_movie_service() -> MovieService:
    """Get movie service."""
    return _movie_service


def get_showtime_service() -> ShowtimeService:
    """Get showtime service."""
    return _showtime_service


def get_seat_map_generator() -> SeatMapGenerator:
    """Get seat map generator."""
    return SeatMapGenerator()


def get_payment_gateway() -> PaymentGateway:
    """Get payment gateway."""
    global _payment_gateway
    if _payment_gateway is None:
        _payment_gateway = SimulatedPaymentGateway()
    return _payment_gateway


# Annotated dependencies
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]
MovieServiceDep = Annotated[MovieService, Depends(get_movie_service)]
ShowtimeServiceDep = Annotated[ShowtimeService, Depends(get_showtime_service)]
SeatMapGeneratorDep = Annotated[SeatMapGenerator, Depends(get_seat_map_generator)]
PaymentGatewayDep = Annotated[PaymentGateway, Depends(get_payment_gateway)]
