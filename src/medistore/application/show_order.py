"""Application service: Show Order use case (query)."""

from __future__ import annotations

from medistore.application.dto import OrderDTO
from medistore.domain.exceptions import AuthenticationRequiredError, EntityNotFoundError
from medistore.domain.repository.identity_provider import IdentityProvider
from medistore.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository, identity: IdentityProvider) -> None:
        self._order_repo = order_repo
        self._identity = identity

    def handle(self, order_id: str) -> OrderDTO:
        user = self._identity.current_user()
        if user is None:
            raise AuthenticationRequiredError("Sign in to see your orders")

        order = self._order_repo.get_by_id(order_id)
        # Someone else's order is reported exactly like a missing one.
        if order is None or order.user_id != user.uid:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return OrderDTO.from_domain(order)
