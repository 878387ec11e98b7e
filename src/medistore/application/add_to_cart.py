"""Application service: Add To Cart use case.

Resolves a catalog product by id and hands it to the cart session.
"""

from __future__ import annotations

from medistore.application.cart_session import CartSession
from medistore.application.dto import MutationResult
from medistore.domain.exceptions import EntityNotFoundError
from medistore.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(self, session: CartSession, product_repo: ProductRepository) -> None:
        self._session = session
        self._product_repo = product_repo

    def handle(self, product_id: str) -> MutationResult:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")
        return self._session.add_item(product)
