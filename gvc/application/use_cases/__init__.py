"""Application use cases."""

from gvc.application.use_cases.subjects import (
    GetSubjectProfileUseCase,
    ListSubjectsUseCase,
    fetch_subject_profile,
)

__all__ = [
    "GetSubjectProfileUseCase",
    "ListSubjectsUseCase",
    "fetch_subject_profile",
]
