"""Per-category figures for the GVC detail page."""

from __future__ import annotations

from collections import Counter

from gvc.application.dtos.profile import ProfileSummary, SubjectProfile
from gvc.domain.enums import ConceptPolarity, DisciplinaryKind, SupplyRequestStatus

_SUPPLY_STATUS_LABELS = {
    SupplyRequestStatus.COMPLETED.value: "Concluída",
    SupplyRequestStatus.PARTIAL.value: "Parcial",
}


def supply_status_label(status: str) -> str:
    """Return the display label for a supply request status.

    Anything other than completed or partial is shown as pending.
    """
    return _SUPPLY_STATUS_LABELS.get(status, "Pendente")


def summarize_profile(profile: SubjectProfile) -> ProfileSummary:
    """Count what each detail card shows for the profile."""
    changes = profile.disciplinary_changes
    concepts = profile.concepts
    return ProfileSummary(
        disciplinary_change_count=len(changes),
        warning_count=sum(1 for c in changes if c.kind == DisciplinaryKind.WARNING),
        suspension_count=sum(1 for c in changes if c.kind == DisciplinaryKind.SUSPENSION),
        commendation_count=len(profile.commendations),
        concept_count=len(concepts),
        positive_concept_count=sum(
            1 for c in concepts if c.polarity == ConceptPolarity.POSITIVE
        ),
        negative_concept_count=sum(
            1 for c in concepts if c.polarity == ConceptPolarity.NEGATIVE
        ),
        active_loan_count=len(profile.equipment_loans),
        active_loaned_item_count=sum(
            len(loan.active_items) for loan in profile.equipment_loans
        ),
        supply_request_count=len(profile.supply_requests),
        supply_requests_by_status=dict(
            Counter(r.status for r in profile.supply_requests)
        ),
        history_size=len(profile.history),
    )
