"""Shared fixtures: a fresh in-memory SQLite database per test."""

from __future__ import annotations

import pytest

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


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_schema()
    yield db
    db.drop_schema()
    db.dispose()


@pytest.fixture
def product_repo(database) -> SqlProductRepository:
    return SqlProductRepository(database.session_factory)


@pytest.fixture
def order_repo(database) -> SqlOrderRepository:
    return SqlOrderRepository(database.session_factory)


@pytest.fixture
def customer_repo(database) -> SqlCustomerRepository:
    return SqlCustomerRepository(database.session_factory)
