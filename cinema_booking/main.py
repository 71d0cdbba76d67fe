"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cinema_booking.api.v1.router import router as v1_router
from cinema_booking.config import get_settings
from cinema_booking.session_store import close_session_store, get_session_store
from cinema_booking.tasks import background_tasks


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info("Starting Cinema Booking API...")

    get_session_store()

    # Start background tasks
    await background_tasks.start()

    yield

    # Shutdown
    logger.info("Shutting down Cinema Booking API...")

    # Stop background tasks
    await background_tasks.stop()

    close_session_store()
    logger.info("Session store cleared")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="""
## Cinema Booking API

Single-user movie ticket booking flow held entirely in memory.

### Seat selection
- **Seats together**: tapping a free seat picks the requested number of seats
  in that row, filling to the right first and then to the left
- **Clear on tap**: tapping any selected seat clears the whole group
- **Occupied seats**: taps are ignored
- **Short rows**: the selection may end up smaller than the ticket count;
  booking is only allowed once it is complete

### Workflow
1. Browse movies and showtimes
2. Start a session with a showtime and ticket count
3. Toggle seats until the selection is complete
4. Create a booking from the selection
5. Check out with a payment method
        """,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routers
    app.include_router(v1_router, prefix="/api")

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "active_sessions": get_session_store().session_count(),
        }

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": str(exc) if settings.DEBUG else None,
            },
        )

    return app


# Create application instance
app = create_app()


def run():
    """Run the application with uvicorn."""
    uvicorn.run(
        "cinema_booking.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
