"""Application service: simple order pipeline.

Builds an order, runs it past whichever validator it was given and
hands it to whichever repository it was given.  Swapping either
collaborator changes behaviour without touching this class.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.validation.order_validator import Validator

logger = logging.getLogger(__name__)


class OrderService:

    def __init__(self, validator: Validator, repository: OrderRepository) -> None:
        self._validator = validator
        self._repository = repository

    def create_order(
        self,
        order_id: str | None,
        customer_name: str | None,
        items: list[str],
        total: Money | str | int | float | Decimal,
    ) -> Order:
        """Create, validate and store a new pending order.

        A ValidationError from the validator reaches the caller as-is;
        nothing is stored in that case.
        """
        order = Order(
            id=order_id,
            customer_name=customer_name,
            items=list(items) if items is not None else [],
            total=_order_total(total),
            status=OrderStatus.PENDING,
        )
        self._validator.validate(order)
        saved = self._repository.save(order)
        logger.debug("Created order %s for %s (%s)", saved.id, saved.customer_name, saved.total)
        return saved

    def get_order(self, order_id: str) -> Order | None:
        return self._repository.find_by_id(order_id)

    def get_all_orders(self) -> tuple[Order, ...]:
        return self._repository.find_all()


def _order_total(total: Money | str | int | float | Decimal) -> Money:
    """Coerce *total* to Money, flooring negative amounts at zero.

    Money cannot hold a negative amount, so a negative total is carried
    as zero and reported by the validator as non-positive, after the
    identity and item checks.
    """
    if isinstance(total, Money):
        return total
    try:
        amount = Decimal(str(total))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid money amount: {total!r}") from exc
    return Money(max(amount, Decimal("0")))
