"""Domain layer: enums and exceptions.

No dependencies on infrastructure. Used by application and
infrastructure layers.
"""

from gvc.domain.enums import (
    ConceptPolarity,
    DisciplinaryKind,
    HistoryEventKind,
    ItemCondition,
    SubjectStatus,
    SupplyRequestStatus,
)
from gvc.domain.exceptions import (
    FetchException,
    GVCException,
    ResourceNotFoundException,
    SubjectNotFoundException,
    ValidationException,
)

__all__ = [
    # Enums
    "ConceptPolarity",
    "DisciplinaryKind",
    "HistoryEventKind",
    "ItemCondition",
    "SubjectStatus",
    "SupplyRequestStatus",
    # Exceptions
    "FetchException",
    "GVCException",
    "ResourceNotFoundException",
    "SubjectNotFoundException",
    "ValidationException",
]
