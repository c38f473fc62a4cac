"""Application service: itemized order checkout.

Finalizing validates the order, prices it through the discount
calculator and marks it completed.  Both collaborators are injected.
"""

from __future__ import annotations

import logging

from storefront.application.dto import CheckoutResult, itemized_order_to_dto
from storefront.domain.model.itemized_order import ItemizedOrder
from storefront.domain.model.order import OrderStatus
from storefront.domain.service.discount_calculator import DiscountCalculator
from storefront.domain.validation.order_validator import Validator

logger = logging.getLogger(__name__)


class CheckoutService:

    def __init__(
        self,
        validator: Validator,
        discount_calculator: DiscountCalculator,
    ) -> None:
        self._validator = validator
        self._discount_calculator = discount_calculator

    def create_order(self, order_id: str, customer_name: str) -> ItemizedOrder:
        """Start an empty pending order; items are added on the order itself."""
        return ItemizedOrder(id=order_id, customer_name=customer_name)

    def finalize_order(self, order: ItemizedOrder) -> CheckoutResult:
        """Validate, price and complete *order*.

        If validation fails the order is left untouched and the
        ValidationError propagates.
        """
        self._validator.validate(order)
        discount = self._discount_calculator.calculate_discount(order)
        total = order.total
        final_total = total - discount

        order.status = OrderStatus.COMPLETED
        logger.debug(
            "Finalized order %s: total=%s discount=%s final=%s",
            order.id, total, discount, final_total,
        )
        return CheckoutResult(
            order=itemized_order_to_dto(order),
            discount=discount,
            total=total,
            final_total=final_total,
        )
