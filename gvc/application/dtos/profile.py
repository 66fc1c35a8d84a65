"""DTOs for the subject profile use cases (no dependency on the store).

Enum-typed fields hold the raw stored string; compare them against the
``str`` enums in gvc.domain.enums (e.g. ``kind == DisciplinaryKind.SUSPENSION``).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TypeAlias

from gvc.domain.enums import HistoryEventKind


@dataclass(frozen=True)
class SubjectResult:
    """GVC read-model (result of the subject point lookup and listing)."""

    id: str
    name: str
    position: int
    status: str
    fixed_post: str | None = None
    registration: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class DisciplinaryChangeResult:
    """Disciplinary change ("alteração"): a warning or a suspension."""

    id: str
    kind: str
    description: str
    remaining_days: int
    suspension_days: int | None = None
    created_at: datetime | None = None
    created_by: str | None = None


@dataclass(frozen=True)
class CommendationResult:
    """Commendation ("elogio"); may name several GVCs at once."""

    id: str
    title: str
    subject_ids: tuple[str, ...]
    subject_names: tuple[str, ...]
    description: str | None = None
    created_at: datetime | None = None
    created_by: str | None = None


@dataclass(frozen=True)
class ConceptResult:
    id: str
    label: str
    polarity: str
    description: str
    created_at: datetime | None = None
    created_by: str | None = None


@dataclass(frozen=True)
class LoanedItem:
    """An item currently out on an equipment loan (not yet returned)."""

    item: str
    size: str
    condition: str
    loaned_at: datetime | None = None
    note: str | None = None


@dataclass(frozen=True)
class EquipmentLoanResult:
    """Equipment loan ("cautela")."""

    id: str
    active_items: tuple[LoanedItem, ...]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return len(self.active_items) > 0


@dataclass(frozen=True)
class RequestedItem:
    item: str
    size: str
    delivered: bool
    condition: str | None = None


@dataclass(frozen=True)
class SupplyRequestResult:
    """Supply request ("solicitação") with per-item delivery flags."""

    id: str
    items: tuple[RequestedItem, ...]
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


HistoryDetails: TypeAlias = (
    DisciplinaryChangeResult
    | CommendationResult
    | ConceptResult
    | EquipmentLoanResult
    | SupplyRequestResult
)

# Source record type carried by each history event kind.
DETAILS_TYPE_BY_KIND: dict[HistoryEventKind, type] = {
    HistoryEventKind.DISCIPLINARY_CHANGE: DisciplinaryChangeResult,
    HistoryEventKind.COMMENDATION: CommendationResult,
    HistoryEventKind.CONCEPT: ConceptResult,
    HistoryEventKind.EQUIPMENT_LOAN: EquipmentLoanResult,
    HistoryEventKind.SUPPLY_REQUEST: SupplyRequestResult,
}


@dataclass(frozen=True)
class HistoryEvent:
    """One entry of the unified history.

    ``details`` is the originating record; its type is fixed by ``kind``
    (see DETAILS_TYPE_BY_KIND).
    """

    id: str
    kind: HistoryEventKind
    description: str
    timestamp: datetime
    details: HistoryDetails


@dataclass(frozen=True)
class SubjectProfile:
    """Everything the GVC detail page shows: the subject, its five record sets, and the merged history."""

    subject: SubjectResult
    disciplinary_changes: tuple[DisciplinaryChangeResult, ...]
    commendations: tuple[CommendationResult, ...]
    concepts: tuple[ConceptResult, ...]
    equipment_loans: tuple[EquipmentLoanResult, ...]
    supply_requests: tuple[SupplyRequestResult, ...]
    history: tuple[HistoryEvent, ...]


@dataclass(frozen=True)
class ProfileSummary:
    """Per-category figures shown on the detail page cards."""

    disciplinary_change_count: int
    warning_count: int
    suspension_count: int
    commendation_count: int
    concept_count: int
    positive_concept_count: int
    negative_concept_count: int
    active_loan_count: int
    active_loaned_item_count: int
    supply_request_count: int
    supply_requests_by_status: dict[str, int]
    history_size: int
