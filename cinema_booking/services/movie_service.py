"""Movie catalog service."""

from collections.abc import Iterable

from cinema_booking.models.movie import Movie

DEFAULT_MOVIES = [
    Movie(
        id="dune-part-two",
        title="Dune: Part Two",
        genre="Sci-Fi / Adventure",
        duration="2h 46m",
        rating=4.8,
        poster_image="poster-placeholder",
        synopsis=(
            "Paul Atreides unites with Chani and the Fremen while on a warpath "
            "of revenge against the conspirators who destroyed his family."
        ),
        is_imax=True,
    ),
    Movie(
        id="the-bad-guys",
        title="the BAD GUYS",
        genre="Animation",
        duration="96 min",
        rating=7.7,
        poster_image="poster-placeholder",
        synopsis=(
            "After a lifetime of legendary heists, notorious criminals Mr. Wolf, "
            "Mr. Snake, Mr. Piranha, Mr. Shark, and Ms. Tarantula are finally caught."
        ),
        is_imax=False,
        year=2025,
        tagline="BACK IN BADNESS",
        imdb_rating=7.7,
    ),
]


class MovieService:
    """Read-only movie catalog."""

    def __init__(self, movies: Iterable[Movie] | None = None):
        self._movies = {
            movie.id: movie
            for movie in (movies if movies is not None else DEFAULT_MOVIES)
        }

    def list_movies(self) -> list[Movie]:
        """Get all movies in catalog order."""
        return list(self._movies.values())

    def get_movie(self, movie_id: str) -> Movie | None:
        """Get movie by ID."""
        return self._movies.get(movie_id)
