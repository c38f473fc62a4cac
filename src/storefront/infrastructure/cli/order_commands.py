"""Simple order pipeline walkthrough (single responsibility, open/closed)."""

from __future__ import annotations

import click

from storefront.application.dto import order_to_dto
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import order_service, strict_order_service
from storefront.infrastructure.cli.rendering import RULE, echo_json


@click.command("solid")
def solid_demo() -> None:
    """Create orders through basic and strict services."""
    click.echo("=== SOLID Patterns Demonstration ===\n")
    click.echo("Single Responsibility: each class has one reason to change:")
    click.echo("- Order: represents order data")
    click.echo("- OrderValidator: validates order data")
    click.echo("- OrderRepository: handles data persistence")
    click.echo("- OrderService: orchestrates business logic\n")
    click.echo("Open/Closed: behaviour changes by swapping collaborators:")
    click.echo("- StrictOrderValidator layers a ceiling on top of OrderValidator")
    click.echo("- DatabaseOrderRepository wraps another repository")
    click.echo("- OrderService works with any validator/repository\n")

    click.echo("Using basic validator and repository:")
    basic = order_service()
    try:
        order1 = basic.create_order(
            "ORD-001", "João Silva", ["Produto A", "Produto B"], "150.00"
        )
        order2 = basic.create_order("ORD-002", "Maria Santos", ["Produto C"], "75.50")

        click.echo("Orders created successfully:")
        echo_json(order_to_dto(order1))
        echo_json(order_to_dto(order2))

        click.echo("\nAll orders in repository:")
        for order in basic.get_all_orders():
            click.echo(f"Order {order.id}: {order.customer_name} - {order.total}")

        click.echo(f"\n{RULE}")
        click.echo("\nUsing strict validator and database repository:")
        extended = strict_order_service()
        order3 = extended.create_order("ORD-003", "Pedro Costa", ["Produto D"], "200.00")

        click.echo("\nOrder created with extended validator and repository:")
        echo_json(order_to_dto(order3))

        click.echo("\nTrying to create an order above the ceiling:")
        try:
            extended.create_order("ORD-004", "Ana Lima", ["Produto E"], "15000.00")
        except DomainException as exc:
            click.echo(f"Validation error (as expected): {exc}")
    except DomainException as exc:
        click.echo(f"Error: {exc}", err=True)
