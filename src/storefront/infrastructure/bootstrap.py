"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from storefront.infrastructure.config import get_settings
from storefront.infrastructure.persistence.database import Database
from storefront.infrastructure.persistence.sql_customer_repository import (
    SqlCustomerRepository,
)
from storefront.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
)
from storefront.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)


@lru_cache(maxsize=None)
def _database(url: str, echo: bool) -> Database:
    if url.startswith("sqlite:///"):
        Path(url.removeprefix("sqlite:///")).parent.mkdir(parents=True, exist_ok=True)
    db = Database(url, echo=echo)
    db.create_schema()
    return db


def database() -> Database:
    """One Database per configured URL, shared by every repository."""
    settings = get_settings()
    return _database(settings.DATABASE_URL, settings.SQL_ECHO)


def product_repository() -> SqlProductRepository:
    return SqlProductRepository(database().session_factory)


def order_repository() -> SqlOrderRepository:
    return SqlOrderRepository(database().session_factory)


def customer_repository() -> SqlCustomerRepository:
    return SqlCustomerRepository(database().session_factory)
