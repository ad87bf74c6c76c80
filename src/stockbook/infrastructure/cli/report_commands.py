"""CLI commands for reports and exports."""

from __future__ import annotations

import click

from stockbook.application.inventory_store import InventoryStore


@click.command("report")
@click.pass_obj
def report_full(store: InventoryStore) -> None:
    """Print the full inventory report."""
    click.echo(store.full_report())


@click.command("low-stock")
@click.option("--save", is_flag=True, default=False, help="Also append to the low stock file.")
@click.pass_obj
def report_low_stock(store: InventoryStore, save: bool) -> None:
    """Print products at or below the low stock threshold."""
    click.echo(store.low_stock_report())
    if save:
        if not store.append_low_stock_report():
            raise click.ClickException("Error writing low stock file.")
        click.echo("Low stock report appended.")


@click.command("export")
@click.pass_obj
def report_export(store: InventoryStore) -> None:
    """Export the inventory to CSV with a summary row."""
    if not store.export_csv():
        raise click.ClickException("Error exporting CSV.")
    click.echo("Inventory exported to CSV with summary row.")
