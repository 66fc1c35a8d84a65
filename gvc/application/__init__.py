"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the store interface (Firestore, in-memory).
"""

from gvc.application.interfaces import IRecordStore
from gvc.application.use_cases import (
    GetSubjectProfileUseCase,
    ListSubjectsUseCase,
    fetch_subject_profile,
)

__all__ = [
    "IRecordStore",
    "GetSubjectProfileUseCase",
    "ListSubjectsUseCase",
    "fetch_subject_profile",
]
