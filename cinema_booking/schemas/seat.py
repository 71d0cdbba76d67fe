"""Seat schemas."""

from cinema_booking.models.seat import SeatStatus
from cinema_booking.schemas.common import BaseSchema


class SeatResponse(BaseSchema):
    """Schema for seat response."""

    id: str
    row: str
    number: int
    status: SeatStatus
