"""GVC use cases: profile aggregation and roster listing."""

from gvc.application.use_cases.subjects.get_subject_profile import (
    GetSubjectProfileUseCase,
    fetch_subject_profile,
)
from gvc.application.use_cases.subjects.list_subjects import ListSubjectsUseCase

__all__ = [
    "GetSubjectProfileUseCase",
    "ListSubjectsUseCase",
    "fetch_subject_profile",
]
