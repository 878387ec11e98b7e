"""JSON-file-backed implementation of DocumentStore.

Each collection is one JSON file mapping document ids to documents.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from medistore.domain.exceptions import DocumentStoreError
from medistore.domain.repository.document_store import (
    DocumentStore,
    resolve_server_timestamps,
)


class JsonDocumentStore(DocumentStore):

    def __init__(self, root: Path) -> None:
        self._root = root

    # --- DocumentStore interface ----------------------------------------------

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        return self._load(collection).get(doc_id)

    def set(self, collection: str, doc_id: str, document: dict[str, Any]) -> None:
        docs = self._load(collection)
        docs[doc_id] = resolve_server_timestamps(document, datetime.now(timezone.utc))
        self._persist(collection, docs)

    def add(self, collection: str, document: dict[str, Any]) -> str:
        doc_id = uuid.uuid4().hex[:20]
        self.set(collection, doc_id, document)
        return doc_id

    def where(self, collection: str, field: str, value: Any) -> list[tuple[str, dict[str, Any]]]:
        return [
            (doc_id, doc)
            for doc_id, doc in self._load(collection).items()
            if isinstance(doc, dict) and doc.get(field) == value
        ]

    # --- File helpers ---------------------------------------------------------

    def _path(self, collection: str) -> Path:
        return self._root / f"{collection}.json"

    def _load(self, collection: str) -> dict[str, dict[str, Any]]:
        path = self._path(collection)
        if not path.exists():
            return {}
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise DocumentStoreError(f"Cannot read collection '{collection}': {exc}") from exc
        if not isinstance(raw, dict):
            raise DocumentStoreError(f"Collection '{collection}' is not a JSON object")
        return raw

    def _persist(self, collection: str, docs: dict[str, dict[str, Any]]) -> None:
        path = self._path(collection)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(docs, indent=2) + "\n", encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            raise DocumentStoreError(f"Cannot write collection '{collection}': {exc}") from exc
