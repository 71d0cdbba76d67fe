"""Application configuration settings."""

from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Cinema Booking API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Seat map
    SEAT_ROWS: list[str] = ["A", "B", "C", "D", "E", "F", "G", "H"]
    SEATS_PER_ROW: int = 8
    OCCUPANCY_PROBABILITY: float = 0.125  # 1/8, three coin flips ANDed
    CINEMA_HALL: str = "Hall 1"

    # Pricing and ticket limits
    STANDARD_SEAT_PRICE: Decimal = Decimal("15.00")
    MIN_TICKETS: int = 1
    MAX_TICKETS: int = 10

    # Showtimes
    DEFAULT_SHOWTIMES: list[str] = [
        "10:30 AM",
        "12:45 PM",
        "3:30 PM",
        "6:15 PM",
        "9:00 PM",
    ]
    ALTERNATIVE_SHOWTIMES: list[str] = [
        "10:45 AM",
        "02:45 PM",
        "08:00 PM",
        "10:30 PM",
    ]
    SHOWTIME_LATENCY_SECONDS: float = 0.0
    BOOKING_DATE_WINDOW_DAYS: int = 7

    # Payment simulation
    PAYMENT_LATENCY_SECONDS: float = 2.0
    PAYMENT_DECLINE_PROBABILITY: float = 0.1  # 1-in-10

    # Session settings
    SESSION_TIMEOUT_SECONDS: int = 600  # 10 minutes
    SESSION_CLEANUP_INTERVAL_SECONDS: int = 30
    BOOKING_TIMEOUT_SECONDS: int = 1800  # 30 minutes

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
