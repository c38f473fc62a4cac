"""List-backed implementation of OrderRepository."""

from __future__ import annotations

from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._orders: list[Order] = []

    # --- OrderRepository interface --------------------------------------------

    def save(self, order: Order) -> Order:
        self._orders.append(order)
        return order

    def find_by_id(self, order_id: str) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def find_all(self) -> tuple[Order, ...]:
        return tuple(self._orders)
