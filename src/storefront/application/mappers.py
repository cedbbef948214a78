"""Domain → DTO mapping shared by the query and command handlers."""

from __future__ import annotations

from storefront.application.dto import (
    AddressDTO,
    AddressSpec,
    CustomerDTO,
    OrderDTO,
    OrderItemDTO,
    ProductDTO,
)
from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Address


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(id=product.id, name=product.name, price=product.price.amount)


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_id=order.customer_id,
        items=[
            OrderItemDTO(
                id=item.id,
                name=item.name,
                price=item.price.amount,
                product_id=item.product_id,
                quantity=item.quantity.value,
                line_total=item.line_total.amount,
            )
            for item in order.items
        ],
        total=order.total.amount,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def customer_to_dto(customer: Customer) -> CustomerDTO:
    address = customer.address
    return CustomerDTO(
        id=customer.id,
        name=customer.name,
        address=(
            AddressDTO(
                street=address.street,
                number=address.number,
                zip_code=address.zip_code,
                city=address.city,
            )
            if address is not None
            else None
        ),
        active=customer.active,
        reward_points=customer.reward_points,
    )


def address_from_spec(spec: AddressSpec | None) -> Address | None:
    if spec is None:
        return None
    return Address(
        street=spec.street,
        number=spec.number,
        zip_code=spec.zip_code,
        city=spec.city,
    )
