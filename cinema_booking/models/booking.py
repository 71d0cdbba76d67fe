"""Booking model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from cinema_booking.models.movie import Movie
from cinema_booking.models.seat import Seat


@dataclass(frozen=True)
class Booking:
    """Immutable record of a confirmed seat selection."""

    id: str
    movie: Movie
    seats: tuple[Seat, ...]
    date: datetime
    time: str
    cinema_hall: str
    total_price: Decimal

    @property
    def seat_ids(self) -> list[str]:
        return [seat.id for seat in self.seats]

    @property
    def seat_count(self) -> int:
        return len(self.seats)
