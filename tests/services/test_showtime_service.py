"""Unit tests for ShowtimeService."""

from datetime import date

import pytest

from cinema_booking.services.showtime_service import ShowtimeService


class TestShowtimeService:
    def test_default_showtimes(self, movie):
        service = ShowtimeService()

        assert service.get_showtimes(movie, date(2026, 10, 19)) == [
            "10:30 AM",
            "12:45 PM",
            "3:30 PM",
            "6:15 PM",
            "9:00 PM",
        ]

    def test_showtimes_ignore_date(self, movie):
        service = ShowtimeService()

        assert service.get_showtimes(movie, date(2026, 1, 1)) == service.get_showtimes(
            movie, date(2026, 12, 31)
        )

    def test_default_selected_is_middle(self):
        service = ShowtimeService(default_showtimes=["1", "2", "3", "4", "5"])

        assert service.get_default_selected_showtime() == "3"

    def test_default_selected_even_count(self):
        service = ShowtimeService(default_showtimes=["1", "2", "3", "4"])

        assert service.get_default_selected_showtime() == "3"

    def test_default_selected_empty(self):
        service = ShowtimeService(default_showtimes=[])

        assert service.get_default_selected_showtime() == ""

    def test_alternative_showtimes(self):
        service = ShowtimeService()

        assert service.get_alternative_showtimes() == [
            "10:45 AM",
            "02:45 PM",
            "08:00 PM",
            "10:30 PM",
        ]

    def test_is_valid_showtime(self, movie):
        service = ShowtimeService()

        assert service.is_valid_showtime(movie, date.today(), "6:15 PM")
        assert not service.is_valid_showtime(movie, date.today(), "6:16 PM")

    def test_available_dates(self):
        dates = ShowtimeService.available_dates(date(2026, 12, 29), days=7)

        assert dates[0] == date(2026, 12, 29)
        assert dates[-1] == date(2027, 1, 4)
        assert len(dates) == 7

    @pytest.mark.asyncio
    async def test_fetch_showtimes(self, movie):
        service = ShowtimeService(default_showtimes=["7:00 PM"], latency_seconds=0.01)

        assert await service.fetch_showtimes(movie, date.today()) == ["7:00 PM"]
