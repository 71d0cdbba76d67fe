"""Booking factory."""

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from ulid import ULID

from cinema_booking.models.booking import Booking
from cinema_booking.models.movie import Movie
from cinema_booking.models.seat import Seat


class BookingFactory:
    """Turns a finalized seat selection into an immutable booking."""

    def _generate_booking_reference(self) -> str:
        """Generate unique booking reference using ULID."""
        return f"BK-{str(ULID())}"

    def create(
        self,
        movie: Movie,
        seats: Iterable[Seat],
        date: datetime,
        time: str,
        cinema_hall: str,
        price_per_seat: Decimal,
    ) -> Booking:
        """
        Create a booking.

        Args:
            movie: Movie being booked
            seats: Selected seats
            date: Booking date
            time: Showtime display string
            cinema_hall: Hall identifier
            price_per_seat: Price charged for each seat

        Returns:
            Booking whose seats are ordered by row then seat number
        """
        snapshot = tuple(sorted(seats, key=lambda seat: (seat.row, seat.number)))

        return Booking(
            id=self._generate_booking_reference(),
            movie=movie,
            seats=snapshot,
            date=date,
            time=time,
            cinema_hall=cinema_hall,
            total_price=price_per_seat * len(snapshot),
        )
