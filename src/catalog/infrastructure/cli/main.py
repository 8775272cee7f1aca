import click

from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_restore,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.seed_commands import seed_product
from catalog.infrastructure.config import Settings, load_environment
from catalog.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--env-file", default=".env", show_default=True,
              help="Environment file loaded before anything else.")
def cli(env_file: str) -> None:
    """Catalog: product persistence on MongoDB"""
    load_environment(env_file)
    settings = Settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def seed() -> None:
    """Seed development data."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_restore)
product.add_command(product_show)
product.add_command(product_update)
seed.add_command(seed_product)
