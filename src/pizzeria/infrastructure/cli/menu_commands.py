"""CLI commands for browsing the menu and pricing a pizza."""

from __future__ import annotations

import json

import click

from pizzeria.application.customize_pizza import CustomizePizzaHandler
from pizzeria.application.example_order import ExampleOrderHandler
from pizzeria.application.list_menu import ListMenuHandler
from pizzeria.domain.exceptions import DomainException


def pizza_options(command):
    """Options shared by every command that describes a pizza."""
    options = [
        click.option("--size", required=True, help="small, medium, large or xlarge."),
        click.option("--crust", default=None, help="Crust (optional)."),
        click.option("--sauce", required=True, help="Sauce."),
        click.option("--cheese", required=True, help="Cheese."),
        click.option("--meat", "meats", multiple=True, help="Meat topping (repeatable)."),
        click.option("--vegetable", "vegetables", multiple=True, help="Vegetable topping (repeatable)."),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def build_pizza(
    size: str,
    crust: str | None,
    sauce: str,
    cheese: str,
    meats: tuple[str, ...],
    vegetables: tuple[str, ...],
) -> dict:
    """Assemble the same JSON body the HTTP API accepts."""
    pizza = {"size": size, "sauce": sauce, "cheese": cheese}
    if crust:
        pizza["crust"] = crust
    pizza["toppings"] = {"meats": list(meats), "vegetables": list(vegetables)}
    return pizza


@click.command("menu")
def menu_show() -> None:
    """Show everything on the menu."""
    menu = ListMenuHandler().handle()

    for section in ("sizes", "crusts", "sauces", "cheeses"):
        click.echo(f"{section.capitalize():<12} {', '.join(menu[section])}")
    click.echo(f"{'Meats':<12} {', '.join(menu['toppings']['meats'])}")
    click.echo(f"{'Vegetables':<12} {', '.join(menu['toppings']['vegetables'])}")


@click.command("customize")
@pizza_options
def pizza_customize(size, crust, sauce, cheese, meats, vegetables) -> None:
    """Price a custom pizza without ordering it."""
    pizza = build_pizza(size, crust, sauce, cheese, meats, vegetables)

    try:
        quote = CustomizePizzaHandler().handle(pizza)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Pizza:    {quote.size} / {quote.crust or '-'} crust / {quote.sauce} sauce / {quote.cheese} cheese")
    toppings = list(quote.toppings["meats"]) + list(quote.toppings["vegetables"])
    click.echo(f"Toppings: {', '.join(toppings) or 'none'}")
    click.echo(f"Price:    {quote.price}")
    click.echo(f"Calories: {quote.calories if quote.calories is not None else 'unknown'}")


@click.command("example")
def example_show() -> None:
    """Print an example order body ready to POST to /order."""
    click.echo(json.dumps(ExampleOrderHandler().handle(), indent=2))
