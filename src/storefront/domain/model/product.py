"""Product: a catalog entry referenced by order items."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Frozen: items share the same Product instance and only ever read it.
    """

    id: str
    name: str
    price: Money
