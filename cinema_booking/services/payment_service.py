"""Payment gateway and checkout."""

import abc
import asyncio
import logging
import random
from datetime import datetime

from ulid import ULID

from cinema_booking.config import get_settings
from cinema_booking.models.booking import Booking
from cinema_booking.models.payment import (
    PaymentFailureReason,
    PaymentMethod,
    PaymentReceipt,
)

logger = logging.getLogger(__name__)

settings = get_settings()


class PaymentError(Exception):
    """Payment failed for a classified reason."""

    def __init__(self, reason: PaymentFailureReason, detail: str | None = None):
        super().__init__(detail or reason.message)
        self.reason = reason
        self.detail = detail

    @property
    def message(self) -> str:
        """Human-readable message for the UI layer."""
        if self.reason == PaymentFailureReason.UNKNOWN and self.detail:
            return f"An unexpected error occurred: {self.detail}"
        return self.reason.message


class PaymentGateway(abc.ABC):
    """Contract for charging a booking."""

    @abc.abstractmethod
    async def process_payment(
        self,
        booking: Booking,
        method: PaymentMethod,
    ) -> PaymentReceipt:
        """
        Charge a booking.

        Raises:
            PaymentError: If the payment fails
        """


class SimulatedPaymentGateway(PaymentGateway):
    """Gateway that waits a fixed delay and randomly declines."""

    def __init__(
        self,
        latency_seconds: float | None = None,
        decline_probability: float | None = None,
        rng: random.Random | None = None,
    ):
        self.latency_seconds = (
            latency_seconds
            if latency_seconds is not None
            else settings.PAYMENT_LATENCY_SECONDS
        )
        self.decline_probability = (
            decline_probability
            if decline_probability is not None
            else settings.PAYMENT_DECLINE_PROBABILITY
        )
        if not 0.0 <= self.decline_probability <= 1.0:
            raise ValueError(
                f"decline_probability {self.decline_probability} is not in [0, 1]"
            )
        self.rng = rng or random.Random()

    async def process_payment(
        self,
        booking: Booking,
        method: PaymentMethod,
    ) -> PaymentReceipt:
        if not isinstance(method, PaymentMethod):
            raise PaymentError(PaymentFailureReason.INVALID_PAYMENT_METHOD)

        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

        if self.rng.random() < self.decline_probability:
            raise PaymentError(PaymentFailureReason.PAYMENT_DECLINED)

        return PaymentReceipt(
            payment_id=f"PAY-{str(ULID())}",
            booking_id=booking.id,
            method=method,
            amount=booking.total_price,
            processed_at=datetime.now(),
        )


class CheckoutService:
    """
    Pays for a booking with the selected payment method.

    A failed payment leaves the booking as it was, so the caller may pick
    another method and retry. Overlapping calls are serialized, so a
    booking is charged at most once.
    """

    def __init__(
        self,
        booking: Booking,
        gateway: PaymentGateway,
        method: PaymentMethod = PaymentMethod.APPLE_PAY,
    ):
        self.booking = booking
        self.gateway = gateway
        self.selected_payment_method = method
        self.receipt: PaymentReceipt | None = None
        self.last_error: PaymentError | None = None
        self._lock = asyncio.Lock()

    @property
    def is_paid(self) -> bool:
        return self.receipt is not None

    @property
    def is_processing(self) -> bool:
        return self._lock.locked()

    def select_payment_method(self, method: PaymentMethod) -> None:
        self.selected_payment_method = method

    async def pay(self) -> PaymentReceipt:
        """
        Process payment for the booking.

        Returns:
            Payment receipt

        Raises:
            PaymentError: If the gateway fails or declines
        """
        async with self._lock:
            if self.receipt is not None:
                return self.receipt
            return await self._charge()

    async def _charge(self) -> PaymentReceipt:
        method = self.selected_payment_method
        logger.info(
            f"Processing {method.value} payment of {self.booking.total_price} "
            f"for booking {self.booking.id}"
        )

        try:
            receipt = await self.gateway.process_payment(self.booking, method)
        except PaymentError as e:
            self.last_error = e
            logger.warning(f"Payment for booking {self.booking.id} failed: {e.reason.value}")
            raise
        except (asyncio.TimeoutError, ConnectionError) as e:
            self.last_error = PaymentError(PaymentFailureReason.NETWORK_FAILURE, str(e))
            logger.warning(f"Payment for booking {self.booking.id} hit a network error: {e}")
            raise self.last_error from e
        except Exception as e:
            self.last_error = PaymentError(PaymentFailureReason.UNKNOWN, str(e))
            logger.error(f"Unexpected payment error for booking {self.booking.id}: {e}")
            raise self.last_error from e

        self.receipt = receipt
        self.last_error = None
        logger.info(f"Payment {receipt.payment_id} succeeded for booking {self.booking.id}")
        return receipt
