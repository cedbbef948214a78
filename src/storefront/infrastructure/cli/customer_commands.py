"""CLI commands for the Customer aggregate."""

from __future__ import annotations

import click

from storefront.application.create_customer import CreateCustomerHandler
from storefront.application.dto import AddressSpec, CustomerDTO
from storefront.application.find_customer import FindCustomerHandler
from storefront.application.list_customers import ListCustomersHandler
from storefront.application.update_customer import UpdateCustomerHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import customer_repository


def _address_options(func):
    """Attach the four optional address options to a command."""
    func = click.option("--city", default=None, help="City.")(func)
    func = click.option("--zip", "zip_code", default=None, help="Zip code.")(func)
    func = click.option("--number", default=None, type=int, help="House number.")(func)
    func = click.option("--street", default=None, help="Street.")(func)
    return func


def _parse_address(
    street: str | None, number: int | None, zip_code: str | None, city: str | None
) -> AddressSpec | None:
    parts = (street, number, zip_code, city)
    if all(p is None for p in parts):
        return None
    if any(p is None for p in parts):
        raise click.BadParameter(
            "An address needs all of --street, --number, --zip and --city."
        )
    return AddressSpec(street=street, number=number, zip_code=zip_code, city=city)  # type: ignore[arg-type]


def _display_customer(dto: CustomerDTO) -> None:
    click.echo(f"Customer {dto.id}  ({'active' if dto.active else 'inactive'})")
    click.echo(f"Name:    {dto.name}")
    if dto.address is not None:
        a = dto.address
        click.echo(f"Address: {a.street}, {a.number}, {a.zip_code} {a.city}")
    click.echo(f"Points:  {dto.reward_points}")


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@_address_options
def customer_add(
    name: str, street: str | None, number: int | None, zip_code: str | None, city: str | None
) -> None:
    """Register a new customer."""
    address = _parse_address(street, number, zip_code, city)
    handler = CreateCustomerHandler(customer_repo=customer_repository())

    try:
        dto = handler.handle(name=name, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_customer(dto)


@click.command("list")
def customer_list() -> None:
    """List all customers."""
    customers = ListCustomersHandler(customer_repo=customer_repository()).handle()

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Active':>7}")
    click.echo("-" * 65)
    for c in customers:
        click.echo(f"{c.id:<36} {c.name:<20} {'yes' if c.active else 'no':>7}")


@click.command("show")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
def customer_show(customer_id: str) -> None:
    """Show a single customer."""
    handler = FindCustomerHandler(customer_repo=customer_repository())

    try:
        dto = handler.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_customer(dto)


@click.command("update")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--name", required=True, help="New name.")
@_address_options
def customer_update(
    customer_id: str,
    name: str,
    street: str | None,
    number: int | None,
    zip_code: str | None,
    city: str | None,
) -> None:
    """Rename a customer and optionally change their address."""
    address = _parse_address(street, number, zip_code, city)
    handler = UpdateCustomerHandler(customer_repo=customer_repository())

    try:
        dto = handler.handle(customer_id=customer_id, name=name, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_customer(dto)
