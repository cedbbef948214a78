"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

import structlog
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from storefront.domain.exceptions import EntityNotFoundError, PersistenceError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.models import ProductModel

logger = structlog.get_logger(__name__)


class SqlProductRepository(ProductRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    # --- ProductRepository interface ------------------------------------------

    def create(self, product: Product) -> None:
        try:
            with self._session_factory.begin() as session:
                session.add(
                    ProductModel(id=product.id, name=product.name, price=product.price.amount)
                )
        except SQLAlchemyError as exc:
            logger.error("product_create_failed", product_id=product.id, error=str(exc))
            raise PersistenceError(f"Error creating product '{product.id}': {exc}") from exc

    def update(self, product: Product) -> None:
        try:
            with self._session_factory.begin() as session:
                result = session.execute(
                    update(ProductModel)
                    .where(ProductModel.id == product.id)
                    .values(name=product.name, price=product.price.amount)
                )
                if result.rowcount == 0:
                    raise EntityNotFoundError(f"Product '{product.id}' not found")
        except SQLAlchemyError as exc:
            logger.error("product_update_failed", product_id=product.id, error=str(exc))
            raise PersistenceError(f"Error updating product '{product.id}': {exc}") from exc

    def find(self, product_id: str) -> Product:
        with self._session_factory() as session:
            model = session.get(ProductModel, product_id)
            if model is None:
                raise EntityNotFoundError(f"Product '{product_id}' not found")
            return self._to_domain(model)

    def find_all(self) -> list[Product]:
        with self._session_factory() as session:
            models = session.scalars(
                select(ProductModel).order_by(ProductModel.created_at, ProductModel.id)
            ).all()
            return [self._to_domain(model) for model in models]

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(model: ProductModel) -> Product:
        return Product(id=model.id, name=model.name, price=Money.of(model.price))
