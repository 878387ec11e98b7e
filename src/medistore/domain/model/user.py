"""The authenticated identity a cart is keyed to."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    uid: str
    email: str | None = None
