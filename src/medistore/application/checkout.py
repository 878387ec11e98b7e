"""Application service: Checkout use case.

Turns the session's current cart into a stored Order.  The cart is
left as it is unless the caller asks for it to be cleared.
"""

from __future__ import annotations

from medistore.application.cart_session import CartSession
from medistore.application.dto import OrderDTO
from medistore.domain.exceptions import AuthenticationRequiredError
from medistore.domain.model.order import Order, ShippingDetails
from medistore.domain.repository.order_repository import OrderRepository
from medistore.utils.logging import get_logger

logger = get_logger(__name__)


class CheckoutHandler:

    def __init__(self, session: CartSession, order_repo: OrderRepository) -> None:
        self._session = session
        self._order_repo = order_repo

    def handle(self, shipping: ShippingDetails, clear_cart: bool = False) -> OrderDTO:
        """Place an order for everything in the cart.

        Steps:
        1. Require a signed-in user.
        2. Snapshot the cart lines and total into an Order.
        3. Persist it and return a DTO.
        4. Optionally empty the cart, locally and in the mirror.
        """
        user = self._session.user
        if user is None:
            raise AuthenticationRequiredError("Sign in to place an order")

        order = Order.place(user_id=user.uid, cart=self._session.cart, shipping=shipping)
        self._order_repo.add(order)
        logger.info("Order %s placed by user %s for %s", order.id, user.uid, order.total)

        if clear_cart:
            result = self._session.clear(persist=True)
            if not result.ok:
                logger.warning(
                    "Order %s placed but the cart could not be cleared: %s",
                    order.id,
                    result.reason,
                )

        return OrderDTO.from_domain(order)
