"""Data Transfer Objects: plain snapshots that cross layer boundaries.

DTOs freeze an order's state at the moment they are built, so a
snapshot taken before finalization keeps showing the old status.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.itemized_order import ItemizedOrder
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class OrderDTO:
    """Output: a simple order as displayed to the user."""

    id: str | None
    customer_name: str | None
    items: list[str]
    total: str  # formatted, e.g. "R$ 150.00"
    status: str


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line of an itemized order."""

    product_id: str
    product_name: str
    unit_price: str
    quantity: int
    subtotal: str


@dataclass(frozen=True)
class ItemizedOrderDTO:
    id: str | None
    customer_name: str | None
    items: list[OrderItemDTO]
    total: str
    status: str


@dataclass(frozen=True)
class CheckoutResult:
    """Output of finalizing an itemized order."""

    order: ItemizedOrderDTO
    discount: Money
    total: Money
    final_total: Money


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_name=order.customer_name,
        items=list(order.items),
        total=str(order.total),
        status=order.status.value,
    )


def itemized_order_to_dto(order: ItemizedOrder) -> ItemizedOrderDTO:
    return ItemizedOrderDTO(
        id=order.id,
        customer_name=order.customer_name,
        items=[
            OrderItemDTO(
                product_id=item.product.id,
                product_name=item.product.name,
                unit_price=str(item.product.price),
                quantity=item.quantity,
                subtotal=str(item.subtotal),
            )
            for item in order.items
        ],
        total=str(order.total),
        status=order.status.value,
    )
