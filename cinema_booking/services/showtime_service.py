"""Showtime service."""

import asyncio
from collections.abc import Sequence
from datetime import date as date_type
from datetime import timedelta

from cinema_booking.config import get_settings
from cinema_booking.models.movie import Movie

settings = get_settings()


class ShowtimeService:
    """
    Supplies showtimes for movies.

    Every movie and date currently gets the same default list. That is a
    known simplification of the data source, not a lookup bug.
    """

    def __init__(
        self,
        default_showtimes: Sequence[str] | None = None,
        alternative_showtimes: Sequence[str] | None = None,
        latency_seconds: float | None = None,
    ):
        self.default_showtimes = list(
            default_showtimes
            if default_showtimes is not None
            else settings.DEFAULT_SHOWTIMES
        )
        self.alternative_showtimes = list(
            alternative_showtimes
            if alternative_showtimes is not None
            else settings.ALTERNATIVE_SHOWTIMES
        )
        self.latency_seconds = (
            latency_seconds
            if latency_seconds is not None
            else settings.SHOWTIME_LATENCY_SECONDS
        )

    def get_showtimes(self, movie: Movie, date: date_type) -> list[str]:
        """Get showtimes for a movie on a date."""
        return list(self.default_showtimes)

    async def fetch_showtimes(self, movie: Movie, date: date_type) -> list[str]:
        """Get showtimes after the simulated lookup delay."""
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)
        return self.get_showtimes(movie, date)

    def get_alternative_showtimes(self) -> list[str]:
        return list(self.alternative_showtimes)

    def get_default_selected_showtime(self) -> str:
        """Get the middle default showtime, or an empty string if none."""
        if not self.default_showtimes:
            return ""
        return self.default_showtimes[len(self.default_showtimes) // 2]

    def is_valid_showtime(self, movie: Movie, date: date_type, time: str) -> bool:
        return time in self.get_showtimes(movie, date)

    @staticmethod
    def available_dates(
        today: date_type,
        days: int | None = None,
    ) -> list[date_type]:
        """Get bookable dates starting from today."""
        if days is None:
            days = settings.BOOKING_DATE_WINDOW_DAYS
        return [today + timedelta(days=offset) for offset in range(days)]
