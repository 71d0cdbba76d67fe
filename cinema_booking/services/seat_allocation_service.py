"""Seat allocation engine for a single booking session."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from cinema_booking.config import get_settings
from cinema_booking.models.booking import Booking
from cinema_booking.models.movie import Movie
from cinema_booking.models.seat import Seat, SeatMap, SeatStatus
from cinema_booking.services.booking_service import BookingFactory
from cinema_booking.services.ticket_service import TicketQuantity

logger = logging.getLogger(__name__)

settings = get_settings()


class SeatAllocationError(Exception):
    """Seat allocation setup error."""

    pass


class SeatNotFoundError(SeatAllocationError):
    """Seat ID does not exist on the seat map."""

    def __init__(self, seat_id: str):
        super().__init__(f"Seat {seat_id!r} not found")
        self.seat_id = seat_id


@dataclass(frozen=True)
class SelectionSnapshot:
    """State of the selection after a change."""

    selected_ids: tuple[str, ...]
    total_price: Decimal
    ticket_count: int

    @property
    def is_complete(self) -> bool:
        return len(self.selected_ids) == self.ticket_count


SelectionListener = Callable[[SelectionSnapshot], None]


class SeatAllocationEngine:
    """
    Owns a seat map and the seats the user has picked for one showing.

    Tapping a free seat picks ``ticket_count`` seats together in that row,
    filling to the right of the tapped seat first and then to the left.
    Tapping any picked seat drops the whole group. Taps on occupied seats are
    ignored, and a row with too few free seats leaves the selection short;
    neither case raises.

    All operations are synchronous and meant for a single caller.
    """

    def __init__(
        self,
        movie: Movie,
        time: str,
        ticket_count: int,
        seat_map: SeatMap,
        standard_price: Decimal | None = None,
        cinema_hall: str | None = None,
        booking_factory: BookingFactory | None = None,
        ticket_limits: TicketQuantity | None = None,
    ):
        limits = ticket_limits or TicketQuantity()
        if not limits.accepts(ticket_count):
            raise SeatAllocationError(
                f"Ticket count must be between {limits.min_tickets} "
                f"and {limits.max_tickets}"
            )

        self.movie = movie
        self.time = time
        self.ticket_count = ticket_count
        self.seat_map = seat_map
        self.standard_price = (
            standard_price if standard_price is not None else settings.STANDARD_SEAT_PRICE
        )
        self.cinema_hall = cinema_hall or settings.CINEMA_HALL
        self.booking_factory = booking_factory or BookingFactory()
        self._selected: set[str] = set()
        self._listeners: list[SelectionListener] = []

    @property
    def selected_ids(self) -> set[str]:
        return set(self._selected)

    @property
    def selected_seats(self) -> list[Seat]:
        """Selected seats ordered by row then seat number."""
        seats = [self.seat_map[seat_id] for seat_id in self._selected]
        return sorted(seats, key=lambda seat: (seat.row, seat.number))

    @property
    def total_price(self) -> Decimal:
        return self.standard_price * len(self._selected)

    @property
    def is_complete(self) -> bool:
        """Whether the selection holds exactly ``ticket_count`` seats."""
        return len(self._selected) == self.ticket_count

    def snapshot(self) -> SelectionSnapshot:
        return SelectionSnapshot(
            selected_ids=tuple(seat.id for seat in self.selected_seats),
            total_price=self.total_price,
            ticket_count=self.ticket_count,
        )

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """
        Register a listener called with a snapshot after every change.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def toggle_seat(self, seat_id: str) -> SelectionSnapshot:
        """
        Handle a tap on a seat.

        Args:
            seat_id: Seat ID such as "C4"

        Returns:
            Selection snapshot after the tap

        Raises:
            SeatNotFoundError: If the seat is not on the map
        """
        seat = self.seat_map.get(seat_id)
        if seat is None:
            raise SeatNotFoundError(seat_id)

        if seat.is_occupied:
            logger.debug(f"Ignoring tap on occupied seat {seat_id}")
            return self.snapshot()

        if seat_id in self._selected:
            self._clear()
            logger.debug(f"Tap on selected seat {seat_id} cleared the selection")
        else:
            self._select_together(seat)
            logger.debug(
                f"Tap on {seat_id} selected {sorted(self._selected)} "
                f"({len(self._selected)}/{self.ticket_count})"
            )

        return self._publish()

    def clear_selection(self) -> SelectionSnapshot:
        """Deselect every selected seat."""
        self._clear()
        return self._publish()

    def create_booking(self, date: datetime | None = None) -> Booking:
        """
        Snapshot the current selection into a booking.

        Completeness is not checked here; callers gate on ``is_complete``.
        """
        booking = self.booking_factory.create(
            movie=self.movie,
            seats=self.selected_seats,
            date=date or datetime.now(),
            time=self.time,
            cinema_hall=self.cinema_hall,
            price_per_seat=self.standard_price,
        )
        logger.info(
            f"Created booking {booking.id} for {self.movie.title} at {self.time} "
            f"with seats {booking.seat_ids}"
        )
        return booking

    def _select_together(self, seat: Seat) -> None:
        self._clear()

        # Occupied seats are left out of the walk entirely
        candidates = [
            candidate
            for candidate in self.seat_map.seats_in_row(seat.row)
            if not candidate.is_occupied
        ]

        start_index = next(
            (
                index
                for index, candidate in enumerate(candidates)
                if candidate.number == seat.number
            ),
            None,
        )
        if start_index is None:
            logger.warning(f"Seat {seat.id} missing from its row candidates")
            return

        for candidate in candidates[start_index:]:
            if len(self._selected) >= self.ticket_count:
                break
            if candidate.status == SeatStatus.AVAILABLE:
                self._select(candidate.id)

        for candidate in reversed(candidates[:start_index]):
            if len(self._selected) >= self.ticket_count:
                break
            if (
                candidate.status == SeatStatus.AVAILABLE
                and candidate.id not in self._selected
            ):
                self._select(candidate.id)

    def _select(self, seat_id: str) -> None:
        self.seat_map.set_status(seat_id, SeatStatus.SELECTED)
        self._selected.add(seat_id)

    def _clear(self) -> None:
        for seat_id in self._selected:
            self.seat_map.set_status(seat_id, SeatStatus.AVAILABLE)
        self._selected.clear()

    def _publish(self) -> SelectionSnapshot:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
        return snapshot
