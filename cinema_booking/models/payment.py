"""Payment models."""

import enum
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


class PaymentMethod(str, enum.Enum):
    """Payment method enum."""

    APPLE_PAY = "Apple Pay"
    CREDIT_CARD = "Credit Card"
    PAYPAL = "PayPal"


class PaymentFailureReason(str, enum.Enum):
    """Classified reason for a failed payment."""

    NETWORK_FAILURE = "NETWORK_FAILURE"
    INVALID_PAYMENT_METHOD = "INVALID_PAYMENT_METHOD"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    PAYMENT_DECLINED = "PAYMENT_DECLINED"
    UNKNOWN = "UNKNOWN"

    @property
    def message(self) -> str:
        """Human-readable message for the UI layer."""
        return _FAILURE_MESSAGES[self]


_FAILURE_MESSAGES = {
    PaymentFailureReason.NETWORK_FAILURE: (
        "Network connection failed. Please check your internet connection."
    ),
    PaymentFailureReason.INVALID_PAYMENT_METHOD: "Invalid payment method selected.",
    PaymentFailureReason.INSUFFICIENT_FUNDS: "Insufficient funds in your account.",
    PaymentFailureReason.PAYMENT_DECLINED: (
        "Payment was declined. Please try another payment method."
    ),
    PaymentFailureReason.UNKNOWN: "An unexpected error occurred.",
}


@dataclass(frozen=True)
class PaymentReceipt:
    """Result of a successful payment."""

    payment_id: str
    booking_id: str
    method: PaymentMethod
    amount: Decimal
    processed_at: datetime
