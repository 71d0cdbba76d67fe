"""Seat map generation."""

import logging
import random
from collections.abc import Iterable, Sequence

from cinema_booking.config import get_settings
from cinema_booking.models.seat import Seat, SeatMap, SeatStatus

logger = logging.getLogger(__name__)

settings = get_settings()


class SeatMapError(Exception):
    """Invalid seat map layout."""

    pass


class SeatMapGenerator:
    """Builds the seat grid for a showing with some seats pre-occupied."""

    def __init__(
        self,
        rows: Sequence[str] | None = None,
        seats_per_row: int | None = None,
        occupancy_probability: float | None = None,
        rng: random.Random | None = None,
    ):
        """
        Initialize seat map generator.

        Args:
            rows: Ordered row labels, each a single uppercase letter
            seats_per_row: Number of seats in every row
            occupancy_probability: Chance that any one seat starts occupied
            rng: Random source for occupancy draws
        """
        self.rows = list(rows if rows is not None else settings.SEAT_ROWS)
        self.seats_per_row = (
            seats_per_row if seats_per_row is not None else settings.SEATS_PER_ROW
        )
        self.occupancy_probability = (
            occupancy_probability
            if occupancy_probability is not None
            else settings.OCCUPANCY_PROBABILITY
        )
        self.rng = rng or random.Random()
        self._validate()

    def _validate(self) -> None:
        if not self.rows:
            raise SeatMapError("At least one row is required")
        if len(set(self.rows)) != len(self.rows):
            raise SeatMapError(f"Duplicate row labels in {self.rows}")
        for row in self.rows:
            if len(row) != 1 or not row.isalpha() or not row.isupper():
                raise SeatMapError(f"Invalid row label {row!r}")
        if self.seats_per_row < 1:
            raise SeatMapError("seats_per_row must be at least 1")
        if not 0.0 <= self.occupancy_probability <= 1.0:
            raise SeatMapError(
                f"occupancy_probability {self.occupancy_probability} is not in [0, 1]"
            )

    def _is_occupied(self) -> bool:
        return self.rng.random() < self.occupancy_probability

    def generate(self, occupied: Iterable[str] | None = None) -> SeatMap:
        """
        Generate a new seat map.

        Args:
            occupied: Explicit seat IDs to mark occupied. When given, no
                random draws are made.

        Returns:
            Fresh seat map with every seat AVAILABLE or OCCUPIED
        """
        fixed = set(occupied) if occupied is not None else None

        seats = []
        for row in self.rows:
            for number in range(1, self.seats_per_row + 1):
                seat_id = f"{row}{number}"
                if fixed is not None:
                    is_occupied = seat_id in fixed
                else:
                    is_occupied = self._is_occupied()
                status = SeatStatus.OCCUPIED if is_occupied else SeatStatus.AVAILABLE
                seats.append(Seat(id=seat_id, row=row, number=number, status=status))

        seat_map = SeatMap(seats)

        if fixed is not None:
            unknown = fixed - {seat.id for seat in seat_map}
            if unknown:
                raise SeatMapError(f"Occupied seats not on map: {sorted(unknown)}")

        logger.debug(
            f"Generated seat map with {len(seat_map)} seats, "
            f"{len(seat_map.seats_with_status(SeatStatus.OCCUPIED))} occupied"
        )
        return seat_map
