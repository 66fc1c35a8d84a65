"""Firestore-backed record store (implements IRecordStore)."""

from __future__ import annotations

from typing import Any

from gvc.application.interfaces.repositories import QueryOp
from gvc.infrastructure.firebase._rest_client import (
    ASCENDING,
    DESCENDING,
    DocumentSnapshot,
    FirestoreRESTClient,
    _Query,
)


def _to_dict(snapshot: DocumentSnapshot) -> dict[str, Any]:
    return {**snapshot.to_dict(), "id": snapshot.id}


class FirestoreRecordStore:
    """Read-only record store over the Firestore REST client.

    Queries carry no limit: every matching document is returned.
    Errors from the HTTP layer (httpx.HTTPError) propagate unchanged; use
    cases wrap them in FetchException.
    """

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    async def _collect(self, query: _Query) -> list[dict[str, Any]]:
        return [_to_dict(snapshot) async for snapshot in query.stream()]

    async def get_document(
        self, collection: str, document_id: str
    ) -> dict[str, Any] | None:
        """Return document by ID."""
        doc = await self._client.collection(collection).document(document_id).get()
        if doc is None:
            return None
        return _to_dict(doc)

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
        """Return documents matching one field filter, ordered on the server."""
        query = self._client.collection(collection).where(field, op, value).order_by(
            order_by, DESCENDING if descending else ASCENDING
        )
        return await self._collect(query)

    async def list_documents(
        self,
        collection: str,
        *,
        order_by: str,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        """Return the whole collection ordered on the server."""
        query = self._client.collection(collection).order_by(
            order_by, DESCENDING if descending else ASCENDING
        )
        return await self._collect(query)
