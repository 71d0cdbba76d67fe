import pytest

from cinema_booking.models.movie import Movie
from cinema_booking.services.movie_service import DEFAULT_MOVIES
from cinema_booking.services.seat_allocation_service import SeatAllocationEngine
from cinema_booking.services.seat_map_service import SeatMapGenerator


@pytest.fixture
def movie() -> Movie:
    return DEFAULT_MOVIES[0]


@pytest.fixture
def make_engine(movie):
    def _make_engine(
        rows=("A",),
        seats_per_row=4,
        occupied=(),
        ticket_count=2,
        **kwargs,
    ) -> SeatAllocationEngine:
        seat_map = SeatMapGenerator(rows=rows, seats_per_row=seats_per_row).generate(
            occupied=occupied
        )
        return SeatAllocationEngine(
            movie=movie,
            time="3:30 PM",
            ticket_count=ticket_count,
            seat_map=seat_map,
            **kwargs,
        )

    return _make_engine
