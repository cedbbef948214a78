"""SQLAlchemy-backed implementation of CustomerRepository."""

from __future__ import annotations

import structlog
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from storefront.domain.exceptions import EntityNotFoundError, PersistenceError
from storefront.domain.model.customer import Customer
from storefront.domain.model.value_objects import Address
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.infrastructure.persistence.models import CustomerModel

logger = structlog.get_logger(__name__)


class SqlCustomerRepository(CustomerRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    # --- CustomerRepository interface -----------------------------------------

    def create(self, customer: Customer) -> None:
        try:
            with self._session_factory.begin() as session:
                session.add(CustomerModel(id=customer.id, **self._to_columns(customer)))
        except SQLAlchemyError as exc:
            logger.error("customer_create_failed", customer_id=customer.id, error=str(exc))
            raise PersistenceError(f"Error creating customer '{customer.id}': {exc}") from exc

    def update(self, customer: Customer) -> None:
        try:
            with self._session_factory.begin() as session:
                result = session.execute(
                    update(CustomerModel)
                    .where(CustomerModel.id == customer.id)
                    .values(**self._to_columns(customer))
                )
                if result.rowcount == 0:
                    raise EntityNotFoundError(f"Customer '{customer.id}' not found")
        except SQLAlchemyError as exc:
            logger.error("customer_update_failed", customer_id=customer.id, error=str(exc))
            raise PersistenceError(f"Error updating customer '{customer.id}': {exc}") from exc

    def find(self, customer_id: str) -> Customer:
        with self._session_factory() as session:
            model = session.get(CustomerModel, customer_id)
            if model is None:
                raise EntityNotFoundError(f"Customer '{customer_id}' not found")
            return self._to_domain(model)

    def find_all(self) -> list[Customer]:
        with self._session_factory() as session:
            models = session.scalars(
                select(CustomerModel).order_by(CustomerModel.created_at, CustomerModel.id)
            ).all()
            return [self._to_domain(model) for model in models]

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_columns(customer: Customer) -> dict:
        address = customer.address
        return {
            "name": customer.name,
            "street": address.street if address else None,
            "number": address.number if address else None,
            "zipcode": address.zip_code if address else None,
            "city": address.city if address else None,
            "active": customer.active,
            "reward_points": customer.reward_points,
        }

    @staticmethod
    def _to_domain(model: CustomerModel) -> Customer:
        address = None
        if model.street is not None:
            address = Address(
                street=model.street,
                number=model.number,  # type: ignore[arg-type]
                zip_code=model.zipcode,  # type: ignore[arg-type]
                city=model.city,  # type: ignore[arg-type]
            )
        return Customer(
            id=model.id,
            name=model.name,
            address=address,
            active=model.active,
            reward_points=model.reward_points,
        )
