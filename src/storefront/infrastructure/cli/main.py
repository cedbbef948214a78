import click

from storefront.infrastructure.cli.customer_commands import (
    customer_add,
    customer_list,
    customer_show,
    customer_update,
)
from storefront.infrastructure.cli.order_commands import (
    order_create,
    order_list,
    order_show,
    order_update,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_show,
    product_update,
)
from storefront.infrastructure.config import get_settings
from storefront.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Storefront — products, customers and orders"""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def customer() -> None:
    """Manage customers."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_update)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
customer.add_command(customer_add)
customer.add_command(customer_list)
customer.add_command(customer_show)
customer.add_command(customer_update)
