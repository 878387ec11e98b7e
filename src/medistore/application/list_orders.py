"""Application service: Order History use case (query)."""

from __future__ import annotations

from medistore.application.dto import OrderDTO
from medistore.domain.exceptions import AuthenticationRequiredError
from medistore.domain.repository.identity_provider import IdentityProvider
from medistore.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository, identity: IdentityProvider) -> None:
        self._order_repo = order_repo
        self._identity = identity

    def handle(self) -> list[OrderDTO]:
        user = self._identity.current_user()
        if user is None:
            raise AuthenticationRequiredError("Sign in to see your orders")
        return [OrderDTO.from_domain(o) for o in self._order_repo.list_for_user(user.uid)]
