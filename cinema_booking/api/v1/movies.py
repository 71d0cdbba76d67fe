"""Movies API endpoints."""

from datetime import date

from fastapi import APIRouter, HTTPException, Query, status

from cinema_booking.api.v1.dependencies import MovieServiceDep, ShowtimeServiceDep
from cinema_booking.schemas.movie import MovieResponse, ShowtimeResponse

router = APIRouter()


@router.get(
    "",
    response_model=list[MovieResponse],
    summary="List movies",
)
async def list_movies(movie_service: MovieServiceDep) -> list[MovieResponse]:
    """List movies now showing."""
    return [MovieResponse.model_validate(m) for m in movie_service.list_movies()]


@router.get(
    "/{movie_id}",
    response_model=MovieResponse,
    summary="Get movie details",
)
async def get_movie(
    movie_id: str,
    movie_service: MovieServiceDep,
) -> MovieResponse:
    """Get movie details by ID."""
    movie = movie_service.get_movie(movie_id)
    if not movie:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Movie not found",
        )
    return MovieResponse.model_validate(movie)


@router.get(
    "/{movie_id}/showtimes",
    response_model=ShowtimeResponse,
    summary="Get showtimes",
)
async def get_showtimes(
    movie_id: str,
    movie_service: MovieServiceDep,
    showtime_service: ShowtimeServiceDep,
    show_date: date | None = Query(None, alias="date"),
) -> ShowtimeResponse:
    """Get showtimes for a movie on a date (defaults to today)."""
    movie = movie_service.get_movie(movie_id)
    if not movie:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Movie not found",
        )

    today = date.today()
    show_date = show_date or today
    showtimes = await showtime_service.fetch_showtimes(movie, show_date)

    return ShowtimeResponse(
        movie_id=movie.id,
        show_date=show_date,
        showtimes=showtimes,
        default_showtime=showtime_service.get_default_selected_showtime(),
        alternative_showtimes=showtime_service.get_alternative_showtimes(),
        available_dates=showtime_service.available_dates(today),
    )
