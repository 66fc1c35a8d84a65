"""In-memory store implementation."""

from gvc.infrastructure.memory.record_store import InMemoryRecordStore

__all__ = ["InMemoryRecordStore"]
