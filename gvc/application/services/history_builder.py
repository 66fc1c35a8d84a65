"""Normalize profile records into history events and merge them.

Each record becomes one HistoryEvent. Records without a timestamp are
placed at ``now`` (the aggregation moment), which puts them at the head
of the history.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from gvc.application.dtos.profile import (
    CommendationResult,
    ConceptResult,
    DisciplinaryChangeResult,
    EquipmentLoanResult,
    HistoryEvent,
    SupplyRequestResult,
)
from gvc.domain.enums import HistoryEventKind

DEFAULT_COMMENDATION_DESCRIPTION = "Elogio registrado"


def active_loans(loans: Iterable[EquipmentLoanResult]) -> tuple[EquipmentLoanResult, ...]:
    """Keep only loans that still have at least one item out."""
    return tuple(loan for loan in loans if loan.is_active)


def change_event(change: DisciplinaryChangeResult, now: datetime) -> HistoryEvent:
    return HistoryEvent(
        id=change.id,
        kind=HistoryEventKind.DISCIPLINARY_CHANGE,
        description=f"{change.kind}: {change.description}",
        timestamp=change.created_at or now,
        details=change,
    )


def commendation_event(commendation: CommendationResult, now: datetime) -> HistoryEvent:
    return HistoryEvent(
        id=commendation.id,
        kind=HistoryEventKind.COMMENDATION,
        description=commendation.title or DEFAULT_COMMENDATION_DESCRIPTION,
        timestamp=commendation.created_at or now,
        details=commendation,
    )


def concept_event(concept: ConceptResult, now: datetime) -> HistoryEvent:
    return HistoryEvent(
        id=concept.id,
        kind=HistoryEventKind.CONCEPT,
        description=f"{concept.label} ({concept.polarity})",
        timestamp=concept.created_at or now,
        details=concept,
    )


def loan_event(loan: EquipmentLoanResult, now: datetime) -> HistoryEvent:
    # Loans are placed by their last update, not creation.
    return HistoryEvent(
        id=loan.id,
        kind=HistoryEventKind.EQUIPMENT_LOAN,
        description=f"Cautela de {len(loan.active_items)} item(ns)",
        timestamp=loan.updated_at or now,
        details=loan,
    )


def supply_request_event(request: SupplyRequestResult, now: datetime) -> HistoryEvent:
    return HistoryEvent(
        id=request.id,
        kind=HistoryEventKind.SUPPLY_REQUEST,
        description=f"Solicitação de {len(request.items)} item(ns) - {request.status}",
        timestamp=request.created_at or now,
        details=request,
    )


def build_history(
    *,
    disciplinary_changes: Iterable[DisciplinaryChangeResult],
    commendations: Iterable[CommendationResult],
    concepts: Iterable[ConceptResult],
    equipment_loans: Iterable[EquipmentLoanResult],
    supply_requests: Iterable[SupplyRequestResult],
    now: datetime,
) -> tuple[HistoryEvent, ...]:
    """Return all records as history events, most recent first.

    Loans without active items produce no event. The sort is stable, so
    equal timestamps keep category order (changes, commendations, concepts,
    loans, requests) and source order within a category.

    Args:
        disciplinary_changes: Changes for the subject.
        commendations: Commendations naming the subject.
        concepts: Concepts for the subject.
        equipment_loans: Loans for the subject (inactive ones are skipped).
        supply_requests: Supply requests for the subject.
        now: Fallback timestamp for records without one.

    Returns:
        Tuple of HistoryEvent sorted by timestamp descending.
    """
    events: list[HistoryEvent] = []
    events.extend(change_event(c, now) for c in disciplinary_changes)
    events.extend(commendation_event(c, now) for c in commendations)
    events.extend(concept_event(c, now) for c in concepts)
    events.extend(loan_event(loan, now) for loan in active_loans(equipment_loans))
    events.extend(supply_request_event(r, now) for r in supply_requests)
    return tuple(sorted(events, key=lambda e: e.timestamp, reverse=True))
