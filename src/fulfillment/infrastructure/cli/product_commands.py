"""CLI commands for products."""

from __future__ import annotations

import click

from fulfillment.application.dto import ProductDTO
from fulfillment.application.list_products import ListProductsHandler
from fulfillment.application.process_product import ProcessProductHandler
from fulfillment.domain.exceptions import DomainException
from fulfillment.infrastructure.bootstrap import order_processor, product_repository


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id} '{dto.name}'  (type={dto.type})")
    click.echo(f"  Available:  {dto.available}")
    click.echo(f"  Lead time:  {dto.lead_time} days")
    click.echo(f"  Expires:    {dto.expiry_date}")
    click.echo(f"  Season:     {dto.season}")


@click.command("list")
@click.pass_context
def product_list(ctx: click.Context) -> None:
    """List all products with their current stock."""
    try:
        handler = ListProductsHandler(product_repo=product_repository(ctx.obj["data_dir"]))
        lines = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Type':<10} {'Available':>10} {'Lead':>6}")
    click.echo("-" * 56)
    for line in lines:
        click.echo(
            f"{line.id:<6} {line.name:<20} {line.type:<10} {line.available:>10} {line.lead_time:>6}"
        )


@click.command("process")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_context
def product_process(ctx: click.Context, product_id: int) -> None:
    """Re-apply fulfillment policy to a single product."""
    try:
        repo = product_repository(ctx.obj["data_dir"])
        handler = ProcessProductHandler(product_repo=repo, processor=order_processor(repo))
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)
