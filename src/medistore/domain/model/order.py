"""Order aggregate, produced by checkout from a cart.

An Order is a snapshot: it copies the cart's lines and total at the
moment of checkout and is never touched by the cart afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum

from medistore.domain.exceptions import ValidationError
from medistore.domain.model.cart import Cart, LineItem
from medistore.domain.model.value_objects import Money


class OrderStatus(Enum):
    PROCESSING = "processing"
    COMPLETED = "completed"


@dataclass(frozen=True)
class ShippingDetails:
    """Contact and delivery details entered at checkout. All required."""

    full_name: str
    email: str
    address: str
    city: str
    state: str
    zip_code: str
    phone: str

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not value or not value.strip():
                label = f.name.replace("_", " ")
                raise ValidationError(f"Shipping {label} is required")
        if "@" not in self.email:
            raise ValidationError(f"Invalid email address: {self.email!r}")


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.place()`` for new orders.  The ``__init__`` is left
    plain so the repository can reconstitute stored orders as-is.
    """

    id: str | None
    user_id: str
    items: list[LineItem]
    total: Money
    shipping: ShippingDetails
    status: OrderStatus = OrderStatus.PROCESSING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def place(user_id: str, cart: Cart, shipping: ShippingDetails) -> Order:
        """Snapshot *cart* into a new order for *user_id*."""
        if not user_id:
            raise ValidationError("An order needs a user")
        if cart.is_empty:
            raise ValidationError("Cannot place an order with an empty cart")

        return Order(
            id=None,
            user_id=user_id,
            items=list(cart.items),
            total=cart.total,
            shipping=shipping,
        )

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)
