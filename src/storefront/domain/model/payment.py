"""Payment aggregate and its method-specific details.

A single Payment class owns the lifecycle (PENDING -> PROCESSING ->
COMPLETED). What differs between payment methods is only the extra
information each one knows about itself, so that part is held in a
``PaymentDetails`` object instead of a Payment subclass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


class PaymentStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"


class PaymentMethod(Enum):
    CREDIT_CARD = "credit_card"
    PIX = "pix"


class PaymentDetails(ABC):
    """Method-specific data a payment renders alongside its base fields."""

    method: PaymentMethod

    @abstractmethod
    def info(self) -> dict[str, Any]:
        """Return the fields this payment method adds to the payment info."""


@dataclass(frozen=True)
class CreditCardDetails(PaymentDetails):

    card_number: str
    card_holder: str

    method = PaymentMethod.CREDIT_CARD

    def masked_card_number(self) -> str:
        """Only the last four digits are ever revealed."""
        return f"****-****-****-{self.card_number[-4:]}"

    def info(self) -> dict[str, Any]:
        return {
            "card_holder": self.card_holder,
            "card_number": self.masked_card_number(),
        }


@dataclass(frozen=True)
class PixDetails(PaymentDetails):

    pix_key: str

    method = PaymentMethod.PIX

    def info(self) -> dict[str, Any]:
        return {"pix_key": self.pix_key}


class Payment:
    """A payment moving through a strictly sequential lifecycle.

    Invariants:
    - ``amount`` is strictly positive
    - status only moves forward, one step at a time
    - ``processed_at`` is set once, when the payment completes
    """

    def __init__(self, amount: Money, details: PaymentDetails) -> None:
        if amount.is_zero:
            raise ValidationError("Payment amount must be greater than zero")
        self.amount = amount
        self.details = details
        self.status = PaymentStatus.PENDING
        self.processed_at: datetime | None = None

    @property
    def method(self) -> PaymentMethod:
        return self.details.method

    # --- State transitions ----------------------------------------------------

    def process(self) -> Payment:
        """Transition PENDING -> PROCESSING."""
        if self.status != PaymentStatus.PENDING:
            raise ValidationError(
                f"Cannot process payment: current status is {self.status.value}, "
                f"expected pending"
            )
        self.status = PaymentStatus.PROCESSING
        return self

    def complete(self) -> Payment:
        """Transition PROCESSING -> COMPLETED and stamp ``processed_at``."""
        if self.status != PaymentStatus.PROCESSING:
            raise ValidationError(
                f"Cannot complete payment: current status is {self.status.value}, "
                f"expected processing"
            )
        self.status = PaymentStatus.COMPLETED
        self.processed_at = datetime.now(timezone.utc)
        return self

    # --- Rendering ------------------------------------------------------------

    def info(self) -> dict[str, Any]:
        base = {
            "amount": str(self.amount.amount),
            "method": self.method.value,
            "status": self.status.value,
            "processed_at": (
                self.processed_at.isoformat() if self.processed_at else None
            ),
        }
        return {**base, **self.details.info()}

    def __repr__(self) -> str:
        return (
            f"Payment(amount={self.amount}, method={self.method.value}, "
            f"status={self.status.value})"
        )


# --- Factories ----------------------------------------------------------------


def credit_card_payment(
    amount: Money | str | int | float, card_number: str, card_holder: str
) -> Payment:
    return Payment(_as_money(amount), CreditCardDetails(card_number, card_holder))


def pix_payment(amount: Money | str | int | float, pix_key: str) -> Payment:
    return Payment(_as_money(amount), PixDetails(pix_key))


def _as_money(amount: Money | str | int | float) -> Money:
    return amount if isinstance(amount, Money) else Money.of(amount)
