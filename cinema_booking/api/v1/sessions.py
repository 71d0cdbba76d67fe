"""Seat selection session API endpoints."""

from datetime import date

from fastapi import APIRouter, HTTPException, status

from cinema_booking.api.v1.bookings import booking_response
from cinema_booking.api.v1.dependencies import (
    MovieServiceDep,
    SeatMapGeneratorDep,
    SessionStoreDep,
    ShowtimeServiceDep,
)
from cinema_booking.schemas.booking import BookingResponse
from cinema_booking.schemas.seat import SeatResponse
from cinema_booking.schemas.session import (
    SelectionResponse,
    SessionCreate,
    SessionResponse,
)
from cinema_booking.services.seat_allocation_service import (
    SeatAllocationEngine,
    SeatAllocationError,
    SeatNotFoundError,
)
from cinema_booking.session_store import (
    SessionEntry,
    SessionNotFoundError,
    SessionStore,
)

router = APIRouter()


def session_response(entry: SessionEntry) -> SessionResponse:
    """Build the response for a session's current state."""
    engine = entry.engine
    snapshot = engine.snapshot()

    return SessionResponse(
        session_id=entry.session_id,
        movie_id=engine.movie.id,
        movie_title=engine.movie.title,
        time=engine.time,
        ticket_count=engine.ticket_count,
        cinema_hall=engine.cinema_hall,
        standard_price=engine.standard_price,
        rows=engine.seat_map.rows,
        seats=[SeatResponse.model_validate(s) for s in engine.seat_map],
        selection=SelectionResponse(
            selected_ids=list(snapshot.selected_ids),
            total_price=snapshot.total_price,
            ticket_count=snapshot.ticket_count,
            is_complete=snapshot.is_complete,
        ),
    )


def _get_session(store: SessionStore, session_id: str) -> SessionEntry:
    try:
        return store.get_session(session_id)
    except SessionNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found",
        )


@router.post(
    "",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start seat selection",
)
async def create_session(
    session_data: SessionCreate,
    store: SessionStoreDep,
    movie_service: MovieServiceDep,
    showtime_service: ShowtimeServiceDep,
    generator: SeatMapGeneratorDep,
) -> SessionResponse:
    """
    Start a seat selection session for a movie, showtime and ticket count.

    A fresh seat map is generated with some seats already taken.
    """
    movie = movie_service.get_movie(session_data.movie_id)
    if not movie:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Movie not found",
        )

    if not showtime_service.is_valid_showtime(movie, date.today(), session_data.time):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Showtime {session_data.time} is not available",
        )

    try:
        engine = SeatAllocationEngine(
            movie=movie,
            time=session_data.time,
            ticket_count=session_data.ticket_count,
            seat_map=generator.generate(),
        )
    except SeatAllocationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    entry = store.create_session(engine)
    return session_response(entry)


@router.get(
    "/{session_id}",
    response_model=SessionResponse,
    summary="Get session state",
)
async def get_session(
    session_id: str,
    store: SessionStoreDep,
) -> SessionResponse:
    """Get the seat map and current selection."""
    return session_response(_get_session(store, session_id))


@router.post(
    "/{session_id}/seats/{seat_id}/toggle",
    response_model=SessionResponse,
    summary="Toggle seat",
)
async def toggle_seat(
    session_id: str,
    seat_id: str,
    store: SessionStoreDep,
) -> SessionResponse:
    """
    Tap a seat.

    A free seat selects a group of seats together; a selected seat clears the
    whole group. Occupied seats are ignored.
    """
    entry = _get_session(store, session_id)

    try:
        entry.engine.toggle_seat(seat_id)
    except SeatNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Seat {seat_id} not found",
        )

    return session_response(entry)


@router.delete(
    "/{session_id}/selection",
    response_model=SessionResponse,
    summary="Clear selection",
)
async def clear_selection(
    session_id: str,
    store: SessionStoreDep,
) -> SessionResponse:
    """Deselect every selected seat."""
    entry = _get_session(store, session_id)
    entry.engine.clear_selection()
    return session_response(entry)


@router.post(
    "/{session_id}/booking",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create booking",
)
async def create_booking(
    session_id: str,
    store: SessionStoreDep,
) -> BookingResponse:
    """
    Create a booking from the current selection.

    The selection must hold exactly the requested number of tickets.
    """
    entry = _get_session(store, session_id)
    engine = entry.engine

    if not engine.is_complete:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=(
                f"Select {engine.ticket_count} seats before continuing "
                f"({len(engine.selected_ids)} selected)"
            ),
        )

    booking = engine.create_booking()
    booking_entry = store.add_booking(booking, session_id)
    return booking_response(booking_entry)
