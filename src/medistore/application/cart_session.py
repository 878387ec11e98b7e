"""Application service: the signed-in user's shopping cart.

Holds the current cart in memory, loads it from the remote mirror
whenever the identity changes, and writes the full cart back after
every mutation.

Store failures never escape this class.  Reconciliation logs them and
keeps whatever cart was already held; mutations log them and return a
failed ``MutationResult``.
"""

from __future__ import annotations

from collections.abc import Callable

from medistore.application.cart_mirror import CartMirror
from medistore.application.dto import MutationResult
from medistore.domain.exceptions import DocumentStoreError
from medistore.domain.model.cart import Cart, LineItem
from medistore.domain.model.product import Product
from medistore.domain.model.user import User
from medistore.domain.model.value_objects import Money
from medistore.domain.repository.identity_provider import IdentityProvider
from medistore.utils.logging import get_logger

logger = get_logger(__name__)

NOT_SIGNED_IN = "Sign in to use the cart"


class CartSession:

    def __init__(self, mirror: CartMirror, identity: IdentityProvider) -> None:
        self._mirror = mirror
        self._identity = identity
        self._user: User | None = None
        self._cart = Cart.empty()
        self._is_syncing = True
        self._unsubscribe: Callable[[], None] | None = None

    # --- Lifecycle ------------------------------------------------------------

    def start(self) -> None:
        """Load the cart for the current user and follow identity changes."""
        if self._unsubscribe is None:
            self._unsubscribe = self._identity.subscribe(self.reconcile)
        self.reconcile(self._identity.current_user())

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # --- State holder ---------------------------------------------------------

    @property
    def user(self) -> User | None:
        return self._user

    @property
    def is_syncing(self) -> bool:
        return self._is_syncing

    @property
    def cart(self) -> Cart:
        return self._cart

    def current(self) -> tuple[LineItem, ...]:
        return self._cart.items

    def total(self) -> Money:
        return self._cart.total

    # --- Reconciliation -------------------------------------------------------

    def reconcile(self, user: User | None) -> None:
        """Establish the cart for *user* from the remote mirror.

        A different identity drops the held cart before anything is
        read, so one user's items are never shown to the next.
        """
        if user != self._user:
            self._cart = Cart.empty()
        self._user = user

        if user is None:
            self._is_syncing = False
            return

        self._is_syncing = True
        try:
            cart = self._mirror.load(user.uid)
            if cart is None:
                self._mirror.create_empty(user.uid)
                cart = Cart.empty()
                logger.info("Created empty cart for user %s", user.uid)
        except DocumentStoreError as exc:
            logger.error("Could not load cart for user %s: %s", user.uid, exc)
        else:
            self._cart = cart
            logger.debug("Loaded %d cart lines for user %s", len(cart), user.uid)
        finally:
            self._is_syncing = False

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product) -> MutationResult:
        """Add one unit of *product*, appending it if it is new."""
        if self._user is None:
            logger.debug("Ignoring add of %s without a signed-in user", product.id)
            return MutationResult.failure(NOT_SIGNED_IN)
        return self._commit(self._user, self._cart.with_product_added(product))

    def update_quantity(self, product_id: str, quantity: int) -> MutationResult:
        """Set the quantity of a line; zero or less removes it."""
        if self._user is None:
            logger.debug("Ignoring quantity change of %s without a signed-in user", product_id)
            return MutationResult.failure(NOT_SIGNED_IN)
        return self._commit(self._user, self._cart.with_quantity(product_id, quantity))

    def remove_item(self, product_id: str) -> MutationResult:
        return self.update_quantity(product_id, 0)

    def clear(self, persist: bool = False) -> MutationResult:
        """Empty the held cart at once.

        Only the in-memory cart is touched unless *persist* is set, in
        which case the empty cart is also written to the mirror.  A
        failed write does not bring the old items back.
        """
        self._cart = Cart.empty()
        if not persist or self._user is None:
            return MutationResult.success()
        return self._commit(self._user, Cart.empty())

    def _commit(self, user: User, cart: Cart) -> MutationResult:
        # Write first; the held cart only advances once the mirror has it.
        try:
            self._mirror.save(user.uid, cart)
        except DocumentStoreError as exc:
            logger.error("Could not save cart for user %s: %s", user.uid, exc)
            return MutationResult.failure(str(exc))

        self._cart = cart
        logger.info("Saved cart for user %s (%d lines)", user.uid, len(cart))
        return MutationResult.success()
