"""Order validators.

Each validator checks one rule set and raises ValidationError on the
first rule that fails, in a fixed order: identity fields, item
presence, total positivity, total ceiling.  Validators never mutate the
order they inspect.

Any object exposing ``id``, ``customer_name``, ``items`` and ``total``
can be validated, so the same rules serve both the simple Order and the
ItemizedOrder.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_ORDER_TOTAL = Money(Decimal("10000.00"))


class Validator(ABC):

    @abstractmethod
    def validate(self, order: Any) -> bool:
        """Return True if *order* is acceptable, raise ValidationError otherwise."""


def _require_identity_and_items(order: Any) -> None:
    if not order.id or not order.customer_name:
        raise ValidationError("Order must have id and customer name")
    if not order.items:
        raise ValidationError("Order must have at least one item")


class ItemizedOrderValidator(Validator):
    """Identity and item presence only; totals are left to checkout."""

    def validate(self, order: Any) -> bool:
        _require_identity_and_items(order)
        return True


class OrderValidator(Validator):

    def validate(self, order: Any) -> bool:
        _require_identity_and_items(order)
        if order.total.is_zero:
            raise ValidationError("Order total must be greater than zero")
        return True


class StrictOrderValidator(Validator):
    """Runs a base validator first, then caps the order total.

    The base validator is injected so the ceiling can be layered on top
    of any rule set.
    """

    def __init__(
        self,
        base: Validator | None = None,
        max_total: Money = MAX_ORDER_TOTAL,
    ) -> None:
        self._base = base if base is not None else OrderValidator()
        self._max_total = max_total

    def validate(self, order: Any) -> bool:
        self._base.validate(order)
        # The ceiling applies to the amount in any currency.
        if order.total.amount > self._max_total.amount:
            raise ValidationError("Order total exceeds maximum allowed value")
        return True
