"""Domain service: tiered discount for itemized orders.

The discount depends only on the order total, so the calculator asks
the order for it rather than summing items itself.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.itemized_order import ItemizedOrder
from storefront.domain.model.value_objects import Money

# (threshold, rate) pairs, highest threshold first.  A total must be
# strictly greater than the threshold to earn the rate.
DISCOUNT_TIERS: tuple[tuple[Decimal, Decimal], ...] = (
    (Decimal("500"), Decimal("0.10")),
    (Decimal("200"), Decimal("0.05")),
)


class DiscountCalculator:

    def __init__(
        self, tiers: tuple[tuple[Decimal, Decimal], ...] = DISCOUNT_TIERS
    ) -> None:
        self._tiers = tuple(sorted(tiers, key=lambda tier: tier[0], reverse=True))

    def calculate_discount(self, order: ItemizedOrder) -> Money:
        total = order.total
        for threshold, rate in self._tiers:
            if total.amount > threshold:
                return total.scaled(rate)
        return Money.zero(total.currency)
