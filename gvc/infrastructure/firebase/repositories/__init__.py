"""Firestore-backed store implementations (swappable with the in-memory store)."""

from gvc.infrastructure.firebase.repositories.record_store_firestore import (
    FirestoreRecordStore,
)

__all__ = ["FirestoreRecordStore"]
