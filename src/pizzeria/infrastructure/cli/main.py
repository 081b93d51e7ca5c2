import sys

import click

from pizzeria.domain.exceptions import DomainException
from pizzeria.infrastructure.bootstrap import order_repository
from pizzeria.infrastructure.cli.menu_commands import (
    example_show,
    menu_show,
    pizza_customize,
)
from pizzeria.infrastructure.cli.order_commands import order_place, order_show
from pizzeria.infrastructure.config import get_settings
from pizzeria.infrastructure.logging_config import setup_logging


@click.group()
def cli() -> None:
    """Pizzeria — custom pizza ordering"""
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE, stream=sys.stderr)


@cli.group()
def order() -> None:
    """Place and look up orders."""


@cli.group()
def db() -> None:
    """Manage the order store."""


@db.command("init")
def db_init() -> None:
    """Create the order store if it does not exist."""
    try:
        order_repository()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Order store ready at {get_settings().orders_path}")


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default from settings).")
@click.option("--port", default=None, type=int, help="Port (default from settings).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    import uvicorn

    from pizzeria.infrastructure.http.app import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(),
        host=host or settings.HOST,
        port=port or settings.PORT,
        log_config=None,
    )


# Register subcommands
cli.add_command(menu_show)
cli.add_command(pizza_customize)
cli.add_command(example_show)
order.add_command(order_place)
order.add_command(order_show)
