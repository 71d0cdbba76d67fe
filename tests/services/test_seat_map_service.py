"""Unit tests for SeatMapGenerator."""

import random

import pytest

from cinema_booking.models.seat import SeatStatus
from cinema_booking.services.seat_map_service import SeatMapError, SeatMapGenerator
from tests.helpers import FixedRandom


class TestSeatMapGenerator:
    def test_default_layout(self):
        seat_map = SeatMapGenerator(occupancy_probability=0.0).generate()

        assert len(seat_map) == 64
        assert seat_map.rows == ["A", "B", "C", "D", "E", "F", "G", "H"]
        assert len({seat.id for seat in seat_map}) == 64

    def test_ids_are_row_plus_number(self):
        seat_map = SeatMapGenerator(rows=["C"], seats_per_row=5).generate(occupied=[])

        assert [seat.id for seat in seat_map.seats_in_row("C")] == [
            "C1",
            "C2",
            "C3",
            "C4",
            "C5",
        ]
        seat = seat_map["C4"]
        assert seat.row == "C"
        assert seat.number == 4
        assert seat.display_name == "C4"

    def test_size_is_rows_times_seats_per_row(self):
        seat_map = SeatMapGenerator(
            rows=["A", "B", "C"], seats_per_row=6, rng=random.Random(7)
        ).generate()

        assert len(seat_map) == 18

    def test_explicit_occupied_seats(self):
        seat_map = SeatMapGenerator(rows=["A", "B"], seats_per_row=3).generate(
            occupied=["A2", "B3"]
        )

        occupied = {seat.id for seat in seat_map.seats_with_status(SeatStatus.OCCUPIED)}
        assert occupied == {"A2", "B3"}
        assert len(seat_map.seats_with_status(SeatStatus.AVAILABLE)) == 4

    def test_unknown_occupied_seat_rejected(self):
        generator = SeatMapGenerator(rows=["A"], seats_per_row=3)

        with pytest.raises(SeatMapError):
            generator.generate(occupied=["A9"])

    def test_occupancy_draw_uses_probability(self):
        # One draw per seat, compared against the probability
        rng = FixedRandom([0.10, 0.125, 0.9, 0.0])
        seat_map = SeatMapGenerator(
            rows=["A"], seats_per_row=4, occupancy_probability=0.125, rng=rng
        ).generate()

        statuses = [seat.status for seat in seat_map.seats_in_row("A")]
        assert statuses == [
            SeatStatus.OCCUPIED,
            SeatStatus.AVAILABLE,
            SeatStatus.AVAILABLE,
            SeatStatus.OCCUPIED,
        ]

    def test_default_probability_is_one_in_eight(self):
        generator = SeatMapGenerator()

        assert generator.occupancy_probability == 1 / 8

    def test_random_occupancy_is_low(self):
        seat_map = SeatMapGenerator(
            rows=list("ABCDEFGH"), seats_per_row=100, rng=random.Random(1234)
        ).generate()

        occupied = len(seat_map.seats_with_status(SeatStatus.OCCUPIED))
        assert 50 < occupied < 150

    def test_full_and_empty_occupancy(self):
        full = SeatMapGenerator(occupancy_probability=1.0).generate()
        empty = SeatMapGenerator(occupancy_probability=0.0).generate()

        assert len(full.seats_with_status(SeatStatus.OCCUPIED)) == 64
        assert len(empty.seats_with_status(SeatStatus.OCCUPIED)) == 0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"rows": []},
            {"rows": ["A", "A"]},
            {"rows": ["a"]},
            {"rows": ["AB"]},
            {"seats_per_row": 0},
            {"occupancy_probability": 1.5},
        ],
    )
    def test_invalid_layout(self, kwargs):
        with pytest.raises(SeatMapError):
            SeatMapGenerator(**kwargs)


class TestSeatMap:
    def test_occupied_seat_status_is_fixed(self):
        seat_map = SeatMapGenerator(rows=["A"], seats_per_row=2).generate(
            occupied=["A1"]
        )

        with pytest.raises(ValueError):
            seat_map.set_status("A1", SeatStatus.SELECTED)
        with pytest.raises(ValueError):
            seat_map.set_status("A2", SeatStatus.OCCUPIED)

        assert seat_map["A1"].status == SeatStatus.OCCUPIED

    def test_set_status_replaces_seat(self):
        seat_map = SeatMapGenerator(rows=["A"], seats_per_row=2).generate(occupied=[])
        before = seat_map["A2"]

        updated = seat_map.set_status("A2", SeatStatus.SELECTED)

        assert before.status == SeatStatus.AVAILABLE
        assert updated.status == SeatStatus.SELECTED
        assert seat_map["A2"] is updated
        assert len(seat_map) == 2
