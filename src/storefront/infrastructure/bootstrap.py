"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.checkout_service import CheckoutService
from storefront.application.order_service import OrderService
from storefront.application.payment_processor import PaymentProcessor
from storefront.domain.service.discount_calculator import DiscountCalculator
from storefront.domain.validation.order_validator import (
    ItemizedOrderValidator,
    OrderValidator,
    StrictOrderValidator,
)
from storefront.infrastructure.persistence.database_order_repository import (
    DatabaseOrderRepository,
)
from storefront.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)


def order_service() -> OrderService:
    return OrderService(OrderValidator(), InMemoryOrderRepository())


def strict_order_service() -> OrderService:
    return OrderService(StrictOrderValidator(), DatabaseOrderRepository())


def payment_processor() -> PaymentProcessor:
    return PaymentProcessor()


def checkout_service() -> CheckoutService:
    return CheckoutService(ItemizedOrderValidator(), DiscountCalculator())
