"""Movie schemas."""

from datetime import date

from cinema_booking.schemas.common import BaseSchema


class MovieResponse(BaseSchema):
    """Schema for movie response."""

    id: str
    title: str
    genre: str
    duration: str
    rating: float
    poster_image: str
    synopsis: str
    is_imax: bool
    year: int | None = None
    tagline: str | None = None
    imdb_rating: float | None = None


class ShowtimeResponse(BaseSchema):
    """Schema for showtimes of a movie on a date."""

    movie_id: str
    show_date: date
    showtimes: list[str]
    default_showtime: str
    alternative_showtimes: list[str]
    available_dates: list[date]
