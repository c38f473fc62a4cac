"""Itemized order walkthrough (SOLID and GRASP together)."""

from __future__ import annotations

import click

from storefront.application.checkout_service import CheckoutService
from storefront.application.dto import itemized_order_to_dto
from storefront.domain.exceptions import DomainException
from storefront.domain.model.itemized_order import ItemizedOrder
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.bootstrap import checkout_service
from storefront.infrastructure.cli.rendering import (
    RULE,
    checkout_result_to_dict,
    echo_json,
)

CATALOG = (
    Product("PROD-001", "Notebook", Money.of("2500.00")),
    Product("PROD-002", "Mouse", Money.of("50.00")),
    Product("PROD-003", "Teclado", Money.of("150.00")),
)


def _finalize(service: CheckoutService, order: ItemizedOrder) -> None:
    click.echo("\nOrder details:")
    echo_json(itemized_order_to_dto(order))

    click.echo("\nFinalizing order:")
    try:
        result = service.finalize_order(order)
    except DomainException as exc:
        click.echo(f"Error: {exc}", err=True)
        return
    echo_json(checkout_result_to_dict(result))


@click.command("checkout")
def checkout_demo() -> None:
    """Build two itemized orders and finalize them with discounts."""
    click.echo("=== Integrated System Demonstration ===\n")
    service = checkout_service()
    notebook, mouse, keyboard = CATALOG

    click.echo("Creating order for João Silva:")
    order1 = service.create_order("ORD-001", "João Silva")
    order1.add_item(notebook, 1).add_item(mouse, 2).add_item(keyboard, 1)
    _finalize(service, order1)

    click.echo(f"\n{RULE}\n\nCreating order for Maria Santos:")
    order2 = service.create_order("ORD-002", "Maria Santos")
    order2.add_item(notebook, 2)
    _finalize(service, order2)

    click.echo("\n=== Patterns Summary ===")
    click.echo("Single Responsibility: each class has one responsibility")
    click.echo("Open/Closed: DiscountCalculator tiers change without touching orders")
    click.echo("Information Expert: OrderItem prices itself, ItemizedOrder totals itself")
