"""Local stand-in for the hosted authentication provider.

Keeps the signed-in user in memory and, when given a file path, in a
small JSON session file so the CLI remembers who is signed in between
invocations.  Credentials are not checked here.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from medistore.domain.exceptions import ValidationError
from medistore.domain.model.user import User
from medistore.domain.repository.identity_provider import IdentityListener, IdentityProvider
from medistore.utils.logging import get_logger

logger = get_logger(__name__)


class LocalIdentityProvider(IdentityProvider):

    def __init__(self, session_file: Path | None = None) -> None:
        self._session_file = session_file
        self._listeners: list[IdentityListener] = []
        self._user = self._read_session()

    # --- IdentityProvider interface -------------------------------------------

    def current_user(self) -> User | None:
        return self._user

    def subscribe(self, listener: IdentityListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Sign in / out --------------------------------------------------------

    def sign_in(self, uid: str, email: str | None = None) -> User:
        if not uid or not uid.strip():
            raise ValidationError("User id is required")
        user = User(uid=uid.strip(), email=email)
        self._change(user)
        return user

    def sign_out(self) -> None:
        self._change(None)

    def _change(self, user: User | None) -> None:
        if user == self._user:
            return
        self._user = user
        self._write_session()
        logger.info("Identity changed to %s", user.uid if user else "anonymous")
        for listener in list(self._listeners):
            listener(user)

    # --- Session file ---------------------------------------------------------

    def _read_session(self) -> User | None:
        if self._session_file is None or not self._session_file.exists():
            return None
        try:
            raw = json.loads(self._session_file.read_text(encoding="utf-8"))
            if not raw:
                return None
            return User(uid=str(raw["uid"]), email=raw.get("email"))
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.warning("Ignoring unreadable session file %s: %s", self._session_file, exc)
            return None

    def _write_session(self) -> None:
        if self._session_file is None:
            return
        raw = {"uid": self._user.uid, "email": self._user.email} if self._user else {}
        self._session_file.parent.mkdir(parents=True, exist_ok=True)
        self._session_file.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
