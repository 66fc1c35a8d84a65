"""Application interfaces (ports)."""

from gvc.application.interfaces.repositories import IRecordStore, QueryOp

__all__ = ["IRecordStore", "QueryOp"]
