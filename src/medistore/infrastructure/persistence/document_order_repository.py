"""OrderRepository backed by the ``orders`` collection of a DocumentStore."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from medistore.application.cart_mirror import line_item_from_raw, line_item_to_raw
from medistore.domain.exceptions import DocumentStoreError, ValidationError
from medistore.domain.model.order import Order, OrderStatus, ShippingDetails
from medistore.domain.model.value_objects import Money
from medistore.domain.repository.document_store import DocumentStore
from medistore.domain.repository.order_repository import OrderRepository

ORDERS_COLLECTION = "orders"

# Domain field name -> stored field name
_SHIPPING_FIELDS = {
    "full_name": "fullName",
    "email": "email",
    "address": "address",
    "city": "city",
    "state": "state",
    "zip_code": "zipCode",
    "phone": "phone",
}


class DocumentOrderRepository(OrderRepository):

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        if order.id is not None:
            raise ValidationError(f"Order #{order.id} has already been placed")
        order.id = self._store.add(ORDERS_COLLECTION, self._to_raw(order))

    def get_by_id(self, order_id: str) -> Order | None:
        raw = self._store.get(ORDERS_COLLECTION, order_id)
        if raw is None:
            return None
        return self._to_domain(order_id, raw)

    def list_for_user(self, user_id: str) -> list[Order]:
        orders = [
            self._to_domain(doc_id, raw)
            for doc_id, raw in self._store.where(ORDERS_COLLECTION, "userId", user_id)
        ]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict[str, Any]:
        return {
            "userId": order.user_id,
            "items": [line_item_to_raw(item) for item in order.items],
            "total": float(order.total.amount),
            "shippingDetails": {
                stored: getattr(order.shipping, attr)
                for attr, stored in _SHIPPING_FIELDS.items()
            },
            "status": order.status.value,
            "createdAt": order.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(order_id: str, raw: dict[str, Any]) -> Order:
        try:
            shipping = raw["shippingDetails"]
            return Order(
                id=order_id,
                user_id=raw["userId"],
                items=[line_item_from_raw(i) for i in raw["items"]],
                total=Money.of(raw["total"]),
                shipping=ShippingDetails(
                    **{attr: shipping[stored] for attr, stored in _SHIPPING_FIELDS.items()}
                ),
                status=OrderStatus(raw["status"]),
                created_at=datetime.fromisoformat(raw["createdAt"]),
            )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise DocumentStoreError(f"Order #{order_id} is malformed: {exc!r}") from exc
