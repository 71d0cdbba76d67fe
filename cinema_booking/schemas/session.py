"""Seat selection session schemas."""

from decimal import Decimal

from pydantic import Field

from cinema_booking.config import get_settings
from cinema_booking.schemas.common import BaseSchema
from cinema_booking.schemas.seat import SeatResponse

settings = get_settings()


class SessionCreate(BaseSchema):
    """Schema for starting a seat selection session."""

    movie_id: str = Field(..., min_length=1, max_length=100)
    time: str = Field(..., min_length=1, max_length=20)
    ticket_count: int = Field(
        ..., ge=settings.MIN_TICKETS, le=settings.MAX_TICKETS
    )


class SelectionResponse(BaseSchema):
    """Schema for the current seat selection."""

    selected_ids: list[str]
    total_price: Decimal
    ticket_count: int
    is_complete: bool


class SessionResponse(BaseSchema):
    """Schema for a session with its seat map."""

    session_id: str
    movie_id: str
    movie_title: str
    time: str
    ticket_count: int
    cinema_hall: str
    standard_price: Decimal
    rows: list[str]
    seats: list[SeatResponse]
    selection: SelectionResponse
