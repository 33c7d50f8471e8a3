"""CLI commands for order processing."""

from __future__ import annotations

import click

from fulfillment.domain.exceptions import DomainException
from fulfillment.infrastructure.bootstrap import order_processor, product_repository


@click.command("process")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to process.")
@click.pass_context
def order_process(ctx: click.Context, order_id: int) -> None:
    """Apply fulfillment policy to every product of an order."""
    try:
        processor = order_processor(product_repository(ctx.obj["data_dir"]))
        processed = processor.process_order(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if processed is None:
        raise click.ClickException(f"Order #{order_id} not found")

    click.echo(f"Order #{processed} processed.")
