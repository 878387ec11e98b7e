"""Remote mirror of a user's cart.

One document per user in the ``carts`` collection::

    {"items": [{"id", "name", "price", "image", "quantity"}, ...],
     "updatedAt": <server timestamp>}

Every write replaces the whole document; there is no version field,
so two sessions writing the same cart are last-write-wins.
"""

from __future__ import annotations

from typing import Any

from medistore.domain.exceptions import ValidationError
from medistore.domain.model.cart import Cart, LineItem
from medistore.domain.model.value_objects import Money, Quantity
from medistore.domain.repository.document_store import SERVER_TIMESTAMP, DocumentStore
from medistore.utils.logging import get_logger

logger = get_logger(__name__)

CARTS_COLLECTION = "carts"


class CartMirror:

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def load(self, user_id: str) -> Cart | None:
        """Return the stored cart, or None if the user has no document yet.

        An ``items`` field that is missing or cannot be read back as line
        items yields an empty cart.
        """
        raw = self._store.get(CARTS_COLLECTION, user_id)
        if raw is None:
            return None
        return self._to_domain(user_id, raw)

    def create_empty(self, user_id: str) -> None:
        self.save(user_id, Cart.empty())

    def save(self, user_id: str, cart: Cart) -> None:
        self._store.set(CARTS_COLLECTION, user_id, self._to_raw(cart))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict[str, Any]:
        return {
            "items": [line_item_to_raw(item) for item in cart],
            "updatedAt": SERVER_TIMESTAMP,
        }

    @staticmethod
    def _to_domain(user_id: str, raw: Any) -> Cart:
        items = raw.get("items") if isinstance(raw, dict) else None
        if not isinstance(items, list):
            return Cart.empty()
        try:
            return Cart(tuple(line_item_from_raw(i) for i in items))
        except (KeyError, TypeError, AttributeError, ValidationError) as exc:
            logger.warning("Discarding malformed cart for user %s: %s", user_id, exc)
            return Cart.empty()


def line_item_to_raw(item: LineItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "price": float(item.price.amount),
        "image": item.image,
        "quantity": item.quantity.value,
    }


def line_item_from_raw(raw: dict[str, Any]) -> LineItem:
    return LineItem(
        id=str(raw["id"]),
        name=raw["name"],
        price=Money.of(raw["price"]),
        image=raw.get("image", ""),
        quantity=Quantity(raw["quantity"]),
    )
