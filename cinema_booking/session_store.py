"""In-memory store for seat selection sessions and bookings."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from ulid import ULID

from cinema_booking.config import get_settings
from cinema_booking.models.booking import Booking
from cinema_booking.services.payment_service import CheckoutService
from cinema_booking.services.seat_allocation_service import SeatAllocationEngine

logger = logging.getLogger(__name__)

settings = get_settings()


class SessionNotFoundError(Exception):
    """Session does not exist or has expired."""

    pass


class BookingNotFoundError(Exception):
    """Booking does not exist."""

    pass


@dataclass
class SessionEntry:
    """A seat selection session and its activity time."""

    session_id: str
    engine: SeatAllocationEngine
    created_at: datetime = field(default_factory=datetime.now)
    last_activity: datetime = field(default_factory=datetime.now)


@dataclass
class BookingEntry:
    """A created booking and its checkout state."""

    booking: Booking
    session_id: str
    checkout: CheckoutService | None = None
    created_at: datetime = field(default_factory=datetime.now)


class SessionStore:
    """
    Holds sessions and bookings in memory.

    Each session owns its own engine; nothing is shared between sessions.
    Bookings are dropped once their confirmation is no longer needed.
    """

    def __init__(
        self,
        session_timeout_seconds: int | None = None,
        booking_timeout_seconds: int | None = None,
    ):
        self.session_timeout = timedelta(
            seconds=session_timeout_seconds
            if session_timeout_seconds is not None
            else settings.SESSION_TIMEOUT_SECONDS
        )
        self.booking_timeout = timedelta(
            seconds=booking_timeout_seconds
            if booking_timeout_seconds is not None
            else settings.BOOKING_TIMEOUT_SECONDS
        )
        self._sessions: dict[str, SessionEntry] = {}
        self._bookings: dict[str, BookingEntry] = {}

    def create_session(self, engine: SeatAllocationEngine) -> SessionEntry:
        """Register an engine under a new session ID."""
        entry = SessionEntry(session_id=str(ULID()), engine=engine)
        self._sessions[entry.session_id] = entry
        logger.info(
            f"Started session {entry.session_id} for {engine.movie.title} "
            f"at {engine.time} ({engine.ticket_count} tickets)"
        )
        return entry

    def get_session(self, session_id: str) -> SessionEntry:
        """
        Get a session and mark it active.

        Raises:
            SessionNotFoundError: If the session is unknown or expired
        """
        entry = self._sessions.get(session_id)
        if entry is None:
            raise SessionNotFoundError(f"Session {session_id} not found")
        entry.last_activity = datetime.now()
        return entry

    def remove_session(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def session_count(self) -> int:
        return len(self._sessions)

    def add_booking(self, booking: Booking, session_id: str) -> BookingEntry:
        entry = BookingEntry(booking=booking, session_id=session_id)
        self._bookings[booking.id] = entry
        return entry

    def get_booking(self, booking_id: str) -> BookingEntry:
        """
        Get a booking entry.

        Raises:
            BookingNotFoundError: If the booking is unknown
        """
        entry = self._bookings.get(booking_id)
        if entry is None:
            raise BookingNotFoundError(f"Booking {booking_id} not found")
        return entry

    def expire_idle_sessions(self, now: datetime | None = None) -> int:
        """
        Drop sessions idle for longer than the session timeout.

        Returns:
            Number of sessions removed
        """
        now = now or datetime.now()
        expired = [
            session_id
            for session_id, entry in self._sessions.items()
            if now - entry.last_activity > self.session_timeout
        ]
        for session_id in expired:
            del self._sessions[session_id]
        return len(expired)

    def booking_count(self) -> int:
        return len(self._bookings)

    def expire_bookings(self, now: datetime | None = None) -> int:
        """
        Drop bookings older than the booking timeout.

        Bookings with a payment in progress are kept.

        Returns:
            Number of bookings removed
        """
        now = now or datetime.now()
        expired = [
            booking_id
            for booking_id, entry in self._bookings.items()
            if now - entry.created_at > self.booking_timeout
            and not (entry.checkout and entry.checkout.is_processing)
        ]
        for booking_id in expired:
            del self._bookings[booking_id]
        return len(expired)

    def clear(self) -> None:
        self._sessions.clear()
        self._bookings.clear()


# Global session store
_session_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Get session store instance."""
    global _session_store
    if _session_store is None:
        _session_store = SessionStore()
    return _session_store


def close_session_store() -> None:
    """Discard all sessions and bookings."""
    global _session_store
    if _session_store is not None:
        _session_store.clear()
        _session_store = None
