from __future__ import annotations

import logging
from pathlib import Path

import click

from fulfillment.infrastructure.cli.order_commands import order_process
from fulfillment.infrastructure.cli.product_commands import (
    product_list,
    product_process,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding products.json and orders.json.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log policy decisions.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """Fulfillment — per-product-type order fulfillment policy"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


@cli.group()
def order() -> None:
    """Process orders."""


@cli.group()
def product() -> None:
    """Inspect and process products."""


# Register subcommands
order.add_command(order_process)
product.add_command(product_list)
product.add_command(product_process)
