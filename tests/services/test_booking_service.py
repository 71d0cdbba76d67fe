"""Unit tests for BookingFactory."""

from datetime import datetime
from decimal import Decimal

import pytest

from cinema_booking.models.seat import Seat, SeatStatus
from cinema_booking.services.booking_service import BookingFactory


class TestBookingFactory:
    @pytest.fixture
    def factory(self):
        return BookingFactory()

    @pytest.fixture
    def seats(self):
        return [
            Seat(id="B2", row="B", number=2, status=SeatStatus.SELECTED),
            Seat(id="A7", row="A", number=7, status=SeatStatus.SELECTED),
            Seat(id="B1", row="B", number=1, status=SeatStatus.SELECTED),
        ]

    def test_create_booking(self, factory, movie, seats):
        date = datetime(2026, 10, 19, 20, 0)

        booking = factory.create(
            movie=movie,
            seats=seats,
            date=date,
            time="9:00 PM",
            cinema_hall="Hall 3",
            price_per_seat=Decimal("15.00"),
        )

        assert booking.id.startswith("BK-")
        assert booking.movie == movie
        assert booking.date == date
        assert booking.time == "9:00 PM"
        assert booking.cinema_hall == "Hall 3"
        assert booking.total_price == Decimal("45.00")
        assert booking.seat_count == 3

    def test_seats_ordered_by_row_then_number(self, factory, movie, seats):
        booking = factory.create(
            movie, seats, datetime.now(), "9:00 PM", "Hall 1", Decimal("10")
        )

        assert booking.seat_ids == ["A7", "B1", "B2"]

    def test_seats_detached_from_input_list(self, factory, movie, seats):
        booking = factory.create(
            movie, seats, datetime.now(), "9:00 PM", "Hall 1", Decimal("10")
        )

        seats.clear()

        assert booking.seat_count == 3
        assert isinstance(booking.seats, tuple)

    def test_unique_ids(self, factory, movie, seats):
        ids = {
            factory.create(
                movie, seats, datetime.now(), "9:00 PM", "Hall 1", Decimal("10")
            ).id
            for _ in range(20)
        }

        assert len(ids) == 20
