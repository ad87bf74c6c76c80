from __future__ import annotations

from pathlib import Path

import click

from stockbook.domain.exceptions import DomainException
from stockbook.infrastructure.bootstrap import inventory_store
from stockbook.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_search,
    product_sort,
    product_update,
)
from stockbook.infrastructure.cli.report_commands import (
    report_export,
    report_full,
    report_low_stock,
)
from stockbook.infrastructure.config import StockbookConfig
from stockbook.infrastructure.log_setup import configure_logging


def _help_requested(ctx: click.Context) -> bool:
    """True when the command line only asks for help text."""
    if ctx.resilient_parsing:
        return True
    return any(arg in ctx.help_option_names for arg in ctx.args)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the inventory and report files.",
)
@click.option(
    "--startup-alert/--no-startup-alert",
    default=None,
    help="Run the low stock check before the command.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    data_dir: Path | None,
    startup_alert: bool | None,
    verbose: bool,
) -> None:
    """Stockbook: Stock Inventory Management"""
    configure_logging(verbose)

    try:
        config = StockbookConfig.from_env(data_dir)
        store = inventory_store(config)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if startup_alert is None:
        startup_alert = config.startup_alert
    if startup_alert and not _help_requested(ctx):
        click.echo("Checking for low stock items...")
        click.echo(store.startup_alert())
        click.echo()

    ctx.obj = store


# Register subcommands
cli.add_command(product_add)
cli.add_command(product_update)
cli.add_command(product_delete)
cli.add_command(product_search)
cli.add_command(product_sort)
cli.add_command(report_full)
cli.add_command(report_low_stock)
cli.add_command(report_export)
