"""Abstract source of the signed-in user.

The cart session subscribes to identity changes so it can reload
(or drop) the cart whenever someone signs in, out, or switches user.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from medistore.domain.model.user import User

IdentityListener = Callable[["User | None"], None]


class IdentityProvider(ABC):

    @abstractmethod
    def current_user(self) -> User | None:
        """Return the authenticated user, or None for an anonymous session."""

    @abstractmethod
    def subscribe(self, listener: IdentityListener) -> Callable[[], None]:
        """Call *listener* with the new user on every identity change.

        Returns a callable that removes the listener.
        """
