"""CLI commands for the cart and the checkout flow."""

from __future__ import annotations

import click

from checkout.application.checkout import CheckoutHandler
from checkout.application.show_cart import ShowCartHandler
from checkout.domain.exceptions import DomainException
from checkout.infrastructure.bootstrap import (
    INVOICE_CHOICES,
    PAYMENT_CHOICES,
    invoice_strategy,
    payment_strategy,
    sample_cart,
    sample_customer,
)


@click.command("show")
def cart_show() -> None:
    """Show the sample shopping cart."""
    dto = ShowCartHandler(sample_cart()).handle()

    click.echo("Shopping Cart:")
    for line in dto.lines:
        click.echo(line)
    click.echo(f"Total: {dto.total}  ({dto.item_count} items)")


@click.command("run")
@click.option(
    "--invoice",
    "invoice_name",
    type=click.Choice(INVOICE_CHOICES),
    default="pdf",
    show_default=True,
    help="Invoice format.",
)
@click.option(
    "--payment",
    "payment_name",
    type=click.Choice(PAYMENT_CHOICES),
    default="credit-card",
    show_default=True,
    help="Payment method.",
)
def checkout_run(invoice_name: str, payment_name: str) -> None:
    """Check out the sample cart for the sample customer."""
    customer = sample_customer()
    cart = sample_cart()
    handler = CheckoutHandler(
        invoice_strategy=invoice_strategy(invoice_name),
        payment_strategy=payment_strategy(payment_name, customer),
    )

    try:
        result = handler.handle(customer=customer, cart=cart)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Shopping Cart:")
    for line in result.cart.lines:
        click.echo(line)
    click.echo()
    click.echo(result.invoice)
    click.echo(result.payment)
