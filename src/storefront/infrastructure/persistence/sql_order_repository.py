"""SQLAlchemy-backed implementation of OrderRepository.

The ``orders.total`` column duplicates ``Order.total``. Every write path
therefore changes items and total inside one transaction so the two can
never disagree.
"""

from __future__ import annotations

from datetime import timezone

import structlog
from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from storefront.domain.exceptions import EntityNotFoundError, PersistenceError
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.models import OrderItemModel, OrderModel

logger = structlog.get_logger(__name__)


class SqlOrderRepository(OrderRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    # --- OrderRepository interface --------------------------------------------

    def create(self, order: Order) -> None:
        try:
            with self._session_factory.begin() as session:
                session.add(self._to_model(order))
        except SQLAlchemyError as exc:
            logger.error("order_create_failed", order_id=order.id, error=str(exc))
            raise PersistenceError(f"Error creating order '{order.id}': {exc}") from exc
        logger.info("order_created", order_id=order.id, items=len(order.items))

    def update(self, order: Order) -> None:
        """Replace the persisted items of *order* and refresh its total.

        Items are deleted and re-inserted rather than diffed, so item rows
        keep their ids only when the caller reuses them. The lookup, the
        delete, the insert and the total update share one transaction;
        leaving the ``with`` block commits or rolls back before returning.
        """
        try:
            with self._session_factory.begin() as session:
                exists = session.scalar(
                    select(OrderModel.id).where(OrderModel.id == order.id)
                )
                if exists is None:
                    raise EntityNotFoundError(f"Order '{order.id}' not found")

                session.execute(
                    delete(OrderItemModel).where(OrderItemModel.order_id == order.id)
                )
                session.execute(
                    insert(OrderItemModel),
                    [
                        self._item_row(order.id, position, item)
                        for position, item in enumerate(order.items)
                    ],
                )
                session.execute(
                    update(OrderModel)
                    .where(OrderModel.id == order.id)
                    .values(total=order.total.amount)
                )
        except SQLAlchemyError as exc:
            logger.error("order_update_failed", order_id=order.id, error=str(exc))
            raise PersistenceError(f"Error updating order '{order.id}': {exc}") from exc
        logger.info("order_updated", order_id=order.id, items=len(order.items))

    def find(self, order_id: str) -> Order:
        with self._session_factory() as session:
            model = session.get(OrderModel, order_id)
            if model is None:
                raise EntityNotFoundError(f"Order '{order_id}' not found")
            return self._to_domain(model)

    def find_all(self) -> list[Order]:
        with self._session_factory() as session:
            models = session.scalars(
                select(OrderModel).order_by(OrderModel.created_at, OrderModel.id)
            ).all()
            return [self._to_domain(model) for model in models]

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _item_row(order_id: str, position: int, item: OrderItem) -> dict:
        return {
            "id": item.id,
            "order_id": order_id,
            "name": item.name,
            "price": item.price.amount,
            "product_id": item.product_id,
            "quantity": item.quantity.value,
            "position": position,
        }

    @staticmethod
    def _to_model(order: Order) -> OrderModel:
        return OrderModel(
            id=order.id,
            customer_id=order.customer_id,
            total=order.total.amount,
            created_at=order.created_at,
            items=[
                OrderItemModel(
                    id=item.id,
                    name=item.name,
                    price=item.price.amount,
                    product_id=item.product_id,
                    quantity=item.quantity.value,
                    position=position,
                )
                for position, item in enumerate(order.items)
            ],
        )

    @staticmethod
    def _to_domain(model: OrderModel) -> Order:
        created_at = model.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Order(
            id=model.id,
            customer_id=model.customer_id,
            items=[
                OrderItem(
                    id=row.id,
                    name=row.name,
                    price=Money.of(row.price),
                    product_id=row.product_id,
                    quantity=Quantity(row.quantity),
                )
                for row in model.items
            ],
            created_at=created_at,
        )
