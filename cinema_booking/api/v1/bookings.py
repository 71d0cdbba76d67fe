"""Bookings API endpoints."""

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from cinema_booking.api.v1.dependencies import PaymentGatewayDep, SessionStoreDep
from cinema_booking.schemas.booking import (
    BookingResponse,
    CheckoutRequest,
    PaymentFailureResponse,
    PaymentResponse,
)
from cinema_booking.schemas.movie import MovieResponse
from cinema_booking.schemas.seat import SeatResponse
from cinema_booking.services.payment_service import CheckoutService, PaymentError
from cinema_booking.session_store import (
    BookingEntry,
    BookingNotFoundError,
    SessionStore,
)

router = APIRouter()


def booking_response(entry: BookingEntry) -> BookingResponse:
    """Build the response for a booking and its payment state."""
    booking = entry.booking
    receipt = entry.checkout.receipt if entry.checkout else None

    return BookingResponse(
        booking_id=booking.id,
        session_id=entry.session_id,
        movie=MovieResponse.model_validate(booking.movie),
        seats=[SeatResponse.model_validate(s) for s in booking.seats],
        date=booking.date,
        time=booking.time,
        cinema_hall=booking.cinema_hall,
        total_price=booking.total_price,
        is_paid=receipt is not None,
        payment_id=receipt.payment_id if receipt else None,
    )


def _get_booking(store: SessionStore, booking_id: str) -> BookingEntry:
    try:
        return store.get_booking(booking_id)
    except BookingNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found",
        )


@router.get(
    "/{booking_id}",
    response_model=BookingResponse,
    summary="Get booking details",
)
async def get_booking(
    booking_id: str,
    store: SessionStoreDep,
) -> BookingResponse:
    """Get booking details with seats."""
    return booking_response(_get_booking(store, booking_id))


@router.post(
    "/{booking_id}/checkout",
    response_model=PaymentResponse,
    responses={status.HTTP_402_PAYMENT_REQUIRED: {"model": PaymentFailureResponse}},
    summary="Pay for booking",
)
async def checkout(
    booking_id: str,
    store: SessionStoreDep,
    gateway: PaymentGatewayDep,
    checkout_data: CheckoutRequest | None = None,
):
    """
    Pay for a booking.

    A failed payment keeps the booking so the payment can be retried. A paid
    booking returns its existing receipt and keeps its original method.
    """
    entry = _get_booking(store, booking_id)

    if entry.checkout is None:
        entry.checkout = CheckoutService(entry.booking, gateway)
    if checkout_data is not None and not entry.checkout.is_paid:
        entry.checkout.select_payment_method(checkout_data.method)

    try:
        receipt = await entry.checkout.pay()
    except PaymentError as e:
        failure = PaymentFailureResponse(reason=e.reason, message=e.message)
        return JSONResponse(
            status_code=status.HTTP_402_PAYMENT_REQUIRED,
            content=failure.model_dump(mode="json"),
        )

    return PaymentResponse.model_validate(receipt)
