"""Application DTOs (read models returned by use cases)."""

from gvc.application.dtos.profile import (
    DETAILS_TYPE_BY_KIND,
    CommendationResult,
    ConceptResult,
    DisciplinaryChangeResult,
    EquipmentLoanResult,
    HistoryDetails,
    HistoryEvent,
    LoanedItem,
    ProfileSummary,
    RequestedItem,
    SubjectProfile,
    SubjectResult,
    SupplyRequestResult,
)

__all__ = [
    "DETAILS_TYPE_BY_KIND",
    "CommendationResult",
    "ConceptResult",
    "DisciplinaryChangeResult",
    "EquipmentLoanResult",
    "HistoryDetails",
    "HistoryEvent",
    "LoanedItem",
    "ProfileSummary",
    "RequestedItem",
    "SubjectProfile",
    "SubjectResult",
    "SupplyRequestResult",
]
