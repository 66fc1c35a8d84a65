"""Store interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
No infrastructure imports.
"""

from __future__ import annotations

from typing import Any, Literal, Protocol

QueryOp = Literal["==", "array-contains"]


class IRecordStore(Protocol):
    """Read-only document store (Firestore or in-memory).

    Returned documents are plain dicts with the document id under "id".
    """

    async def get_document(
        self, collection: str, document_id: str
    ) -> dict[str, Any] | None:
        """Return one document by id, or None if it does not exist."""

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
        """Return documents where ``field op value``, ordered by ``order_by``."""

    async def list_documents(
        self,
        collection: str,
        *,
        order_by: str,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        """Return every document in the collection ordered by ``order_by``."""
