"""In-memory record store (implements IRecordStore).

Holds documents as ``{collection: {document_id: data}}``. Used for tests,
local demos and anywhere a Firestore project is not available.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from gvc.application.interfaces.repositories import QueryOp


def _matches(data: Mapping[str, Any], field: str, op: QueryOp, value: Any) -> bool:
    if field not in data:
        return False
    current = data[field]
    if op == "==":
        return current == value
    if op == "array-contains":
        return isinstance(current, list | tuple) and value in current
    raise ValueError(f"Unsupported query operator: {op!r}")


def _ordered(
    docs: list[dict[str, Any]], order_by: str, descending: bool
) -> list[dict[str, Any]]:
    """Sort on ``order_by``; documents without the field (or with None) go last."""
    present = [d for d in docs if d.get(order_by) is not None]
    missing = [d for d in docs if d.get(order_by) is None]
    present.sort(key=lambda d: d[order_by], reverse=descending)
    return present + missing


class InMemoryRecordStore:
    """Dict-backed store with the same read semantics as FirestoreRecordStore.

    Returned documents are deep copies, so callers can never mutate the store.
    """

    def __init__(
        self, collections: Mapping[str, Mapping[str, Mapping[str, Any]]] | None = None
    ) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        for name, docs in (collections or {}).items():
            for doc_id, data in docs.items():
                self.add(name, doc_id, data)

    def add(self, collection: str, document_id: str, data: Mapping[str, Any]) -> None:
        """Insert or replace one document (seeding helper; not part of IRecordStore)."""
        self._collections.setdefault(collection, {})[document_id] = copy.deepcopy(dict(data))

    def _documents(self, collection: str) -> list[dict[str, Any]]:
        return [
            {**copy.deepcopy(data), "id": doc_id}
            for doc_id, data in self._collections.get(collection, {}).items()
        ]

    async def get_document(
        self, collection: str, document_id: str
    ) -> dict[str, Any] | None:
        data = self._collections.get(collection, {}).get(document_id)
        if data is None:
            return None
        return {**copy.deepcopy(data), "id": document_id}

    async def query_documents(
        self,
        collection: str,
        field: str,
        op: QueryOp,
        value: Any,
        *,
        order_by: str,
        descending: bool = True,
    ) -> list[dict[str, Any]]:
        docs = [d for d in self._documents(collection) if _matches(d, field, op, value)]
        return _ordered(docs, order_by, descending)

    async def list_documents(
        self,
        collection: str,
        *,
        order_by: str,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        return _ordered(self._documents(collection), order_by, descending)
