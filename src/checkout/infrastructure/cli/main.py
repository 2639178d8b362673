import click

from checkout.infrastructure.cli.checkout_commands import cart_show, checkout_run
from checkout.infrastructure.config import ConfigError, Settings
from checkout.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override CHECKOUT_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Checkout — cart, invoice and payment demo"""
    try:
        settings = Settings.from_env()
        if log_level is not None:
            settings = Settings(log_level=log_level.upper(), log_format=settings.log_format)
    except ConfigError as exc:
        raise click.UsageError(str(exc))
    configure_logging(settings)


@cli.group()
def cart() -> None:
    """Inspect the cart."""


# Register subcommands
cart.add_command(cart_show)
cli.add_command(checkout_run)
