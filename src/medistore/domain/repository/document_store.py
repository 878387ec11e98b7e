"""Abstract document store.

The cart mirror and the order records live in a hosted document
database.  The domain only needs a handful of primitives from it:
read one document, replace one document, add a document under a
store-assigned id, and an equality query on a top-level field.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any


class _ServerTimestamp:
    """Placeholder replaced by the store's own clock at write time."""

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()


def resolve_server_timestamps(document: dict[str, Any], now: datetime) -> dict[str, Any]:
    """Return a copy of *document* with top-level SERVER_TIMESTAMP values set to *now*."""
    return {
        key: now.isoformat() if value is SERVER_TIMESTAMP else value
        for key, value in document.items()
    }


class DocumentStore(ABC):
    """Document database port.

    Implementations raise ``DocumentStoreError`` for any failure to
    reach or decode the underlying storage.
    """

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """Return the document, or None if it does not exist."""

    @abstractmethod
    def set(self, collection: str, doc_id: str, document: dict[str, Any]) -> None:
        """Create or fully replace the document."""

    @abstractmethod
    def add(self, collection: str, document: dict[str, Any]) -> str:
        """Store a new document under a generated id and return the id."""

    @abstractmethod
    def where(self, collection: str, field: str, value: Any) -> list[tuple[str, dict[str, Any]]]:
        """Return ``(id, document)`` pairs whose *field* equals *value*."""
