import logging

import click

from storefront.infrastructure.cli.checkout_commands import checkout_demo
from storefront.infrastructure.cli.order_commands import solid_demo
from storefront.infrastructure.cli.payment_commands import grasp_demo
from storefront.infrastructure.logging_setup import setup_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """storefront: order, payment and checkout walkthroughs"""
    setup_logging(logging.DEBUG if verbose else logging.INFO)


@cli.command("all")
@click.pass_context
def run_all(ctx: click.Context) -> None:
    """Run every walkthrough in sequence."""
    for command in (solid_demo, grasp_demo, checkout_demo):
        ctx.invoke(command)
        click.echo()


# Register subcommands
cli.add_command(solid_demo)
cli.add_command(grasp_demo)
cli.add_command(checkout_demo)
