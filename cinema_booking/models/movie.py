"""Movie model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Movie:
    """Movie shown in the cinema."""

    id: str
    title: str
    genre: str
    duration: str
    rating: float
    poster_image: str
    synopsis: str
    is_imax: bool = False
    year: int | None = None
    tagline: str | None = None
    imdb_rating: float | None = None
