"""Unit tests for TicketQuantity and MovieService."""

import pytest

from cinema_booking.services.movie_service import MovieService
from cinema_booking.services.ticket_service import TicketQuantity


class TestTicketQuantity:
    def test_starts_at_minimum(self):
        tickets = TicketQuantity()

        assert tickets.count == 1
        assert tickets.can_decrease is False
        assert tickets.can_increase is True

    def test_increase_stops_at_maximum(self):
        tickets = TicketQuantity(count=9)

        assert tickets.increase() == 10
        assert tickets.increase() == 10
        assert tickets.can_increase is False

    def test_decrease_stops_at_minimum(self):
        tickets = TicketQuantity(count=2)

        assert tickets.decrease() == 1
        assert tickets.decrease() == 1

    def test_initial_count_clamped(self):
        assert TicketQuantity(count=50).count == 10
        assert TicketQuantity(count=-3).count == 1

    def test_accepts(self):
        tickets = TicketQuantity()

        assert tickets.accepts(1) is True
        assert tickets.accepts(10) is True
        assert tickets.accepts(0) is False
        assert tickets.accepts(11) is False

    def test_invalid_bounds(self):
        with pytest.raises(ValueError):
            TicketQuantity(min_tickets=5, max_tickets=2)


class TestMovieService:
    def test_list_movies(self):
        titles = [movie.title for movie in MovieService().list_movies()]

        assert titles == ["Dune: Part Two", "the BAD GUYS"]

    def test_get_movie(self):
        service = MovieService()

        assert service.get_movie("the-bad-guys").tagline == "BACK IN BADNESS"
        assert service.get_movie("missing") is None
