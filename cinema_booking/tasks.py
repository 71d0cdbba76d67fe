"""Background tasks for the booking service."""

import asyncio
import logging

from cinema_booking.config import get_settings
from cinema_booking.session_store import get_session_store

logger = logging.getLogger(__name__)

settings = get_settings()


async def cleanup_expired_sessions(interval_seconds: float | None = None) -> None:
    """Background task to drop idle sessions and stale bookings."""
    interval = (
        interval_seconds
        if interval_seconds is not None
        else settings.SESSION_CLEANUP_INTERVAL_SECONDS
    )
    logger.info("Starting session cleanup task")

    while True:
        try:
            expired_count = get_session_store().expire_idle_sessions()
            if expired_count > 0:
                logger.info(f"Cleaned up {expired_count} idle sessions")

            expired_bookings = get_session_store().expire_bookings()
            if expired_bookings > 0:
                logger.info(f"Cleaned up {expired_bookings} expired bookings")
        except Exception as e:
            logger.error(f"Error in cleanup task: {e}")

        await asyncio.sleep(interval)


class BackgroundTaskManager:
    """Manager for background tasks."""

    def __init__(self):
        self.tasks: list[asyncio.Task] = []

    async def start(self) -> None:
        """Start all background tasks."""
        self.tasks.append(
            asyncio.create_task(cleanup_expired_sessions())
        )
        logger.info("Background tasks started")

    async def stop(self) -> None:
        """Stop all background tasks."""
        for task in self.tasks:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        self.tasks.clear()
        logger.info("Background tasks stopped")


# Global instance
background_tasks = BackgroundTaskManager()
