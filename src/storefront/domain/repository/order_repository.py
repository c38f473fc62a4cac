"""Abstract repository for the simple Order.

Defined in the domain layer so the service never depends on a concrete
store.  Repositories are append-only: there is no update or delete.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Append an order and return it unchanged."""

    @abstractmethod
    def find_by_id(self, order_id: str) -> Order | None:
        """Return the first order with this ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> tuple[Order, ...]:
        """Return every stored order in insertion order."""
