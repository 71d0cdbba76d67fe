"""Ticket quantity selection."""

from cinema_booking.config import get_settings

settings = get_settings()


class TicketQuantity:
    """Ticket counter clamped to the allowed range."""

    def __init__(
        self,
        count: int | None = None,
        min_tickets: int | None = None,
        max_tickets: int | None = None,
    ):
        self.min_tickets = min_tickets if min_tickets is not None else settings.MIN_TICKETS
        self.max_tickets = max_tickets if max_tickets is not None else settings.MAX_TICKETS
        if self.min_tickets > self.max_tickets:
            raise ValueError("min_tickets cannot exceed max_tickets")

        initial = count if count is not None else self.min_tickets
        self.count = min(max(initial, self.min_tickets), self.max_tickets)

    def accepts(self, count: int) -> bool:
        """Whether a requested ticket count is within the allowed range."""
        return self.min_tickets <= count <= self.max_tickets

    @property
    def can_decrease(self) -> bool:
        return self.count > self.min_tickets

    @property
    def can_increase(self) -> bool:
        return self.count < self.max_tickets

    def decrease(self) -> int:
        if self.can_decrease:
            self.count -= 1
        return self.count

    def increase(self) -> int:
        if self.can_increase:
            self.count += 1
        return self.count
