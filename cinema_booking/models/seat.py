"""Seat and seat map models."""

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace


class SeatStatus(str, enum.Enum):
    """Seat status enum."""

    AVAILABLE = "AVAILABLE"
    OCCUPIED = "OCCUPIED"
    SELECTED = "SELECTED"


@dataclass(frozen=True)
class Seat:
    """A single seat in a showing's seat map.

    Seats are immutable values; the seat map swaps in a new instance when a
    status changes, so any seat handed out is a stable snapshot.
    """

    id: str
    row: str
    number: int
    status: SeatStatus = SeatStatus.AVAILABLE

    @property
    def display_name(self) -> str:
        return f"{self.row}{self.number}"

    @property
    def is_occupied(self) -> bool:
        return self.status == SeatStatus.OCCUPIED


class SeatMap:
    """Ordered collection of every seat for one showing.

    The set of seats never changes after construction. Only statuses are
    updated, and ``OCCUPIED`` seats are frozen in place.
    """

    def __init__(self, seats: Iterable[Seat]):
        self._seats: dict[str, Seat] = {}
        self._rows: dict[str, list[str]] = {}

        for seat in seats:
            if seat.id in self._seats:
                raise ValueError(f"Duplicate seat id {seat.id}")
            if seat.id != f"{seat.row}{seat.number}":
                raise ValueError(
                    f"Seat id {seat.id} does not match {seat.row}{seat.number}"
                )
            self._seats[seat.id] = seat
            self._rows.setdefault(seat.row, []).append(seat.id)

        for seat_ids in self._rows.values():
            seat_ids.sort(key=lambda seat_id: self._seats[seat_id].number)

    def __len__(self) -> int:
        return len(self._seats)

    def __iter__(self) -> Iterator[Seat]:
        return iter(list(self._seats.values()))

    def __contains__(self, seat_id: object) -> bool:
        return seat_id in self._seats

    def __getitem__(self, seat_id: str) -> Seat:
        return self._seats[seat_id]

    def get(self, seat_id: str) -> Seat | None:
        """Get seat by ID."""
        return self._seats.get(seat_id)

    @property
    def rows(self) -> list[str]:
        """Row labels in map order."""
        return list(self._rows)

    def seats_in_row(self, row: str) -> list[Seat]:
        """Get the seats of a row, ascending by seat number."""
        return [self._seats[seat_id] for seat_id in self._rows.get(row, [])]

    def seats_with_status(self, status: SeatStatus) -> list[Seat]:
        return [seat for seat in self._seats.values() if seat.status == status]

    def set_status(self, seat_id: str, status: SeatStatus) -> Seat:
        """
        Update a seat's status.

        Only toggles between AVAILABLE and SELECTED are allowed; occupancy is
        fixed when the map is generated.

        Raises:
            KeyError: If the seat does not exist
            ValueError: If the transition touches OCCUPIED
        """
        seat = self._seats[seat_id]
        if seat.is_occupied or status == SeatStatus.OCCUPIED:
            raise ValueError(f"Seat {seat_id} occupancy cannot change")

        updated = replace(seat, status=status)
        self._seats[seat_id] = updated
        return updated
