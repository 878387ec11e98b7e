"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from medistore.application.cart_mirror import CartMirror
from medistore.application.cart_session import CartSession
from medistore.infrastructure.config import get_settings
from medistore.infrastructure.identity.local_identity_provider import LocalIdentityProvider
from medistore.infrastructure.persistence.document_order_repository import (
    DocumentOrderRepository,
)
from medistore.infrastructure.persistence.json_document_store import JsonDocumentStore
from medistore.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def document_store() -> JsonDocumentStore:
    return JsonDocumentStore(get_settings().data_dir / "store")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().data_dir / "products.json")


def order_repository() -> DocumentOrderRepository:
    return DocumentOrderRepository(document_store())


def identity_provider() -> LocalIdentityProvider:
    return LocalIdentityProvider(get_settings().data_dir / "session.json")


def cart_session(identity: LocalIdentityProvider | None = None) -> CartSession:
    """Build a cart session for the signed-in user and load their cart."""
    session = CartSession(CartMirror(document_store()), identity or identity_provider())
    session.start()
    return session
