"""CLI commands for orders."""

from __future__ import annotations

import click

from pizzeria.application.dto import OrderDTO
from pizzeria.application.place_order import PlaceOrderHandler
from pizzeria.application.show_order import ShowOrderHandler
from pizzeria.domain.exceptions import DomainException
from pizzeria.infrastructure.bootstrap import order_repository
from pizzeria.infrastructure.cli.menu_commands import build_pizza, pizza_options


@click.command("place")
@pizza_options
@click.option("--token", required=True, help="Payment token (56 characters).")
@click.option("--amount", required=True, type=float, help="Amount paid, e.g. 16.28.")
@click.option("--currency", default="USD", show_default=True, help="Currency code.")
def order_place(size, crust, sauce, cheese, meats, vegetables, token, amount, currency) -> None:
    """Place an order for a custom pizza."""
    body = build_pizza(size, crust, sauce, cheese, meats, vegetables)
    body["payment"] = {"token": token, "amount": amount, "currency": currency}

    handler = PlaceOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(body)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Payment processed successfully and order placed.")
    _display_order(dto)


def _display_order(dto: OrderDTO) -> None:
    items = dto.items
    toppings = items.get("toppings") or {}
    names = list(toppings.get("meats") or []) + list(toppings.get("vegetables") or [])

    click.echo(f"Order {dto.order_id}  (status={dto.status})")
    click.echo(f"  Size:      {items.get('size')}")
    click.echo(f"  Crust:     {items.get('crust') or '-'}")
    click.echo(f"  Sauce:     {items.get('sauce')}")
    click.echo(f"  Cheese:    {items.get('cheese')}")
    click.echo(f"  Toppings:  {', '.join(names) or 'none'}")
    click.echo(f"  Paid:      {dto.paid_amount:.2f}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is None:
        click.echo(f"Order {order_id} not found.")
        return

    _display_order(dto)
