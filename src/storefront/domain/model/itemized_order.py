"""ItemizedOrder aggregate: an order that owns its line items.

Each OrderItem knows its own subtotal and the order knows its own
total; both are derived on every access so they always reflect the
current items.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.order import OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


@dataclass
class OrderItem:
    """A product reference plus the quantity ordered."""

    product: Product
    quantity: int

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity


@dataclass
class ItemizedOrder:
    """Aggregate root for orders built item by item.

    ``add_item`` accepts any quantity; acceptance rules are applied
    later by the validator at checkout.
    """

    id: str | None
    customer_name: str | None
    items: list[OrderItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING

    def add_item(self, product: Product, quantity: int) -> ItemizedOrder:
        """Append a line for *product* and return the order for chaining."""
        self.items.append(OrderItem(product=product, quantity=quantity))
        return self

    @property
    def total(self) -> Money:
        if not self.items:
            return Money.zero()
        result = Money.zero(self.items[0].product.price.currency)
        for item in self.items:
            result = result + item.subtotal
        return result
