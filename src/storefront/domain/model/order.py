"""The simple order model.

The order carries a precomputed total and a flat list of item
descriptions. It does not validate itself: acceptance rules live in the
validators so that alternative rule sets can be swapped in without
touching this class.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from storefront.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass
class Order:
    """A customer order with a fixed total.

    ``id`` may be empty or None here; the validator is what rejects it.
    """

    id: str | None
    customer_name: str | None
    items: list[str] = field(default_factory=list)
    total: Money = field(default_factory=Money.zero)
    status: OrderStatus = OrderStatus.PENDING
