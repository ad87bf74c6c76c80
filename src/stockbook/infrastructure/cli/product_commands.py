"""CLI commands that change or look up products."""

from __future__ import annotations

import click

from stockbook.application.inventory_store import InventoryStore
from stockbook.domain.exceptions import DomainException

NOT_FOUND = "Product not found."


def _warn_if_unsaved(store: InventoryStore) -> None:
    if not store.last_save_ok:
        click.echo("Warning: changes could not be saved to disk.", err=True)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--price", required=True, help="Unit price (e.g. 2.50).")
@click.pass_obj
def product_add(store: InventoryStore, name: str, quantity: int, price: str) -> None:
    """Add a new product."""
    try:
        store.add(name=name, quantity=quantity, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Product added successfully!")
    _warn_if_unsaved(store)


@click.command("update")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="New quantity.")
@click.option("--price", required=True, help="New unit price.")
@click.pass_obj
def product_update(store: InventoryStore, name: str, quantity: int, price: str) -> None:
    """Update stock and price of an existing product."""
    try:
        product = store.update(name=name, quantity=quantity, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if product is None:
        raise click.ClickException(NOT_FOUND)
    click.echo("Stock updated successfully!")
    _warn_if_unsaved(store)


@click.command("delete")
@click.option("--name", required=True, help="Product name.")
@click.pass_obj
def product_delete(store: InventoryStore, name: str) -> None:
    """Delete every product with this name."""
    if not store.delete(name):
        raise click.ClickException(NOT_FOUND)
    click.echo("Product deleted successfully!")
    _warn_if_unsaved(store)


@click.command("search")
@click.option("--name", required=True, help="Product name.")
@click.pass_obj
def product_search(store: InventoryStore, name: str) -> None:
    """Look up a product by name (case-insensitive)."""
    product = store.search(name)
    if product is None:
        raise click.ClickException(NOT_FOUND)
    click.echo(f"Found: {store.describe(product)}")


@click.command("sort")
@click.option(
    "--by",
    "order",
    required=True,
    type=click.Choice(["name", "value"]),
    help="Sort key: name (A-Z) or total value (highest first).",
)
@click.pass_obj
def product_sort(store: InventoryStore, order: str) -> None:
    """Reorder the saved inventory."""
    if order == "name":
        store.sort_by_name()
        click.echo("Products sorted by name.")
    else:
        store.sort_by_value()
        click.echo("Products sorted by total value.")
    _warn_if_unsaved(store)
