"""OrderRepository decorator that announces every save.

Stands in for a database-backed store: it reports the write through
``logging`` and hands storage to the wrapped repository.
"""

from __future__ import annotations

import logging

from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)

logger = logging.getLogger(__name__)


class DatabaseOrderRepository(OrderRepository):

    def __init__(self, inner: OrderRepository | None = None) -> None:
        self._inner = inner if inner is not None else InMemoryOrderRepository()

    def save(self, order: Order) -> Order:
        logger.info("[Database] Saving order %s to database", order.id)
        return self._inner.save(order)

    def find_by_id(self, order_id: str) -> Order | None:
        return self._inner.find_by_id(order_id)

    def find_all(self) -> tuple[Order, ...]:
        return self._inner.find_all()
