"""Application service: payment processing and history."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from storefront.domain.model.payment import Payment
from storefront.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class PaymentProcessor:

    def __init__(self) -> None:
        self._payments: list[Payment] = []

    def process_payment(self, payment: Payment) -> Payment:
        """Drive *payment* through processing and completion, then record it."""
        payment.process()
        payment.complete()
        self._payments.append(payment)
        logger.debug("Processed %s payment of %s", payment.method.value, payment.amount)
        return payment

    def get_payment_history(self) -> list[dict[str, Any]]:
        return [payment.info() for payment in self._payments]

    def get_total_processed(self) -> Money:
        """Sum of every recorded payment amount, whatever its status.

        Amounts are added as plain numbers and reported in the currency
        of the first payment; use ``get_totals_by_currency`` when the
        history mixes currencies.
        """
        if not self._payments:
            return Money.zero()
        amount = sum((payment.amount.amount for payment in self._payments), Decimal("0"))
        return Money(amount, self._payments[0].amount.currency)

    def get_totals_by_currency(self) -> dict[str, Money]:
        totals: dict[str, Money] = {}
        for payment in self._payments:
            currency = payment.amount.currency
            totals[currency] = totals.get(currency, Money.zero(currency)) + payment.amount
        return totals
