"""Payment pipeline walkthrough (information expert)."""

from __future__ import annotations

import click

from storefront.domain.model.payment import credit_card_payment, pix_payment
from storefront.infrastructure.bootstrap import payment_processor
from storefront.infrastructure.cli.rendering import echo_json


@click.command("grasp")
def grasp_demo() -> None:
    """Process a credit card and a PIX payment."""
    click.echo("=== GRASP Pattern Demonstration ===\n")
    click.echo("Information Expert: each class owns what it knows best:")
    click.echo("- Payment: its own status and lifecycle")
    click.echo("- CreditCardDetails: how to mask the card number")
    click.echo("- PixDetails: its PIX key")
    click.echo("- PaymentProcessor: payment history and totals\n")

    processor = payment_processor()
    credit = credit_card_payment("250.00", "1234567890123456", "João Silva")
    pix = pix_payment("100.00", "joao.silva@email.com")

    click.echo("Processing credit card payment:")
    processor.process_payment(credit)
    echo_json(credit.info())

    click.echo("\nProcessing PIX payment:")
    processor.process_payment(pix)
    echo_json(pix.info())

    click.echo("\nPayment History:")
    for index, entry in enumerate(processor.get_payment_history(), start=1):
        click.echo(f"Payment {index}:")
        echo_json(entry)

    click.echo(f"\nTotal processed: {processor.get_total_processed()}")
