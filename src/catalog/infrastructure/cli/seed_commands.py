"""CLI commands for seeding development data."""

from __future__ import annotations

import click

from catalog.domain.model.product import Product
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.config import Settings

DEFAULT_PRODUCTS = ["Asus", "Acer", "Intel", "AMD", "Klevv"]


def seed_names(count: int) -> list[str]:
    """Default names first, then 'Product 6', 'Product 7', ..."""
    if count <= len(DEFAULT_PRODUCTS):
        return DEFAULT_PRODUCTS[:count]
    extra = [f"Product {i + 1}" for i in range(len(DEFAULT_PRODUCTS), count)]
    return DEFAULT_PRODUCTS + extra


@click.command("product")
@click.option("--count", "-c", default=5, show_default=True, type=click.IntRange(min=1),
              help="Number of records to seed.")
def seed_product(count: int) -> None:
    """Seed the product collection with draft products."""
    settings = Settings()
    if not settings.is_development:
        raise click.ClickException(
            "Seed command can only be run in development environment "
            f"(current environment: {settings.APP_ENV})"
        )

    click.echo("Seeding product data...")
    repo = product_repository(settings)

    inserted = 0
    for name in seed_names(count):
        if repo.exists_by_name(name):
            click.echo(f"  skipped '{name}' (already exists)")
            continue
        repo.insert(Product.create(name=name))
        inserted += 1

    click.echo(f"Successfully seeded {inserted} product records.")
