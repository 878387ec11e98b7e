"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from medistore.domain.model.cart import Cart, LineItem
from medistore.domain.model.order import Order
from medistore.domain.model.product import Product


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a cart mutation.

    ``ok`` is False when nobody is signed in or the mirror write
    failed; ``reason`` then says which.
    """

    ok: bool
    reason: str | None = None

    @staticmethod
    def success() -> MutationResult:
        return MutationResult(ok=True)

    @staticmethod
    def failure(reason: str) -> MutationResult:
        return MutationResult(ok=False, reason=reason)


@dataclass(frozen=True)
class LineItemDTO:
    id: str
    name: str
    image: str
    quantity: int
    unit_price: str  # formatted, e.g. "₹49.99"
    line_total: str

    @staticmethod
    def from_domain(item: LineItem) -> LineItemDTO:
        return LineItemDTO(
            id=item.id,
            name=item.name,
            image=item.image,
            quantity=item.quantity.value,
            unit_price=str(item.price),
            line_total=str(item.line_total),
        )


@dataclass(frozen=True)
class CartDTO:
    items: list[LineItemDTO]
    item_count: int
    total: str

    @staticmethod
    def from_domain(cart: Cart) -> CartDTO:
        return CartDTO(
            items=[LineItemDTO.from_domain(item) for item in cart],
            item_count=cart.item_count,
            total=str(cart.total),
        )


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str
    category: str
    description: str
    image: str
    in_stock: bool

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            category=product.category,
            description=product.description,
            image=product.image,
            in_stock=product.in_stock,
        )


@dataclass(frozen=True)
class CatalogDTO:
    products: list[ProductDTO]
    categories: list[str]


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order as displayed to the user."""

    id: str
    status: str
    items: list[LineItemDTO]
    total: str
    ship_to: str
    created_at: str

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        s = order.shipping
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            status=order.status.value,
            items=[LineItemDTO.from_domain(item) for item in order.items],
            total=str(order.total),
            ship_to=f"{s.full_name}, {s.address}, {s.city}, {s.state} {s.zip_code}",
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
