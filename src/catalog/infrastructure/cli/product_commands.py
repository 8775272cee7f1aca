"""CLI commands for the Product aggregate."""

from __future__ import annotations

import json

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ProductDTO
from catalog.application.list_products import ListProductsHandler
from catalog.application.restore_product import RestoreProductHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.repository.search import SearchCriteria
from catalog.infrastructure.bootstrap import product_repository


def _parse_detail(raw: str | None) -> dict | None:
    """Parse a JSON object given on the command line."""
    if raw is None:
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        raise click.BadParameter(f"Invalid JSON: {raw!r}", param_hint="--detail")
    if not isinstance(value, dict):
        raise click.BadParameter("Expected a JSON object.", param_hint="--detail")
    return value


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}  (status={dto.status}, version={dto.lock_version})")
    click.echo(f"Name:     {dto.name}")
    extra = {k: v for k, v in dto.detail_info.items() if k != "change_log"}
    if extra:
        click.echo(f"Details:  {json.dumps(extra, sort_keys=True)}")
    for key, value in sorted(dto.detail_info.get("change_log", {}).items()):
        if value is not None:
            click.echo(f"  {key:<12} {value}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--status", default="draft", show_default=True, help="Initial status.")
@click.option("--detail", default=None, help="Extra fields as a JSON object.")
@click.option("--actor", default="system", show_default=True, help="Who is acting.")
def product_add(name: str, status: str, detail: str | None, actor: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            name=name, status=status, detail_info=_parse_detail(detail), actor=actor
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added  (status={dto.status})")


@click.command("list")
@click.option("--name", default=None, help="Case-insensitive name fragment.")
@click.option("--status", default=None, help="Only this status.")
@click.option("--page", default=1, show_default=True, type=int)
@click.option("--page-size", default=10, show_default=True, type=int)
@click.option("--sort", "sort_by", default="id", show_default=True,
              type=click.Choice(["id", "name"]))
@click.option("--desc", is_flag=True, help="Sort descending.")
@click.option("--include-deleted", is_flag=True, help="Show soft-deleted products too.")
def product_list(
    name: str | None,
    status: str | None,
    page: int,
    page_size: int,
    sort_by: str,
    desc: bool,
    include_deleted: bool,
) -> None:
    """List products in the catalog."""
    filters = {k: v for k, v in {"name": name, "status": status}.items() if v}

    try:
        criteria = SearchCriteria(
            filter=filters,
            page=page,
            page_size=page_size,
            sort_by=sort_by,
            sort_dir="desc" if desc else "asc",
            include_deleted=include_deleted,
        )
        result = ListProductsHandler(product_repo=product_repository()).handle(criteria)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'Status':<12} {'Ver':>4}")
    click.echo("-" * 55)
    for p in result.items:
        click.echo(f"{p.id:<6} {p.name:<30} {p.status:<12} {p.lock_version:>4}")

    pagination = result.meta["pagination"]
    click.echo(
        f"\nPage {pagination['page']}  "
        f"({pagination['display']} of {pagination['total']} products)"
    )


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--status", default=None, help="New status.")
@click.option("--detail", default=None, help="Fields to merge, as a JSON object.")
@click.option("--lock-version", default=None, type=int,
              help="Version you last read; rejects stale updates.")
@click.option("--actor", default="system", show_default=True, help="Who is acting.")
def product_update(
    product_id: int,
    name: str | None,
    status: str | None,
    detail: str | None,
    lock_version: int | None,
    actor: str,
) -> None:
    """Update a product's name, status or details."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            product_id=product_id,
            name=name,
            status=status,
            detail_info=_parse_detail(detail),
            lock_version=lock_version,
            actor=actor,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} updated  (status={dto.status}, version={dto.lock_version})")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--actor", default="system", show_default=True, help="Who is acting.")
def product_delete(product_id: int, actor: str) -> None:
    """Soft-delete a product."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id, actor=actor)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' deleted")


@click.command("restore")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--actor", default="system", show_default=True, help="Who is acting.")
def product_restore(product_id: int, actor: str) -> None:
    """Restore a soft-deleted product as a draft."""
    handler = RestoreProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id, actor=actor)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' restored  (status={dto.status})")
