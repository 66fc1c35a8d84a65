"""Tests for history normalization and merging."""

from gvc.application.dtos.profile import (
    DETAILS_TYPE_BY_KIND,
    CommendationResult,
    ConceptResult,
    DisciplinaryChangeResult,
    EquipmentLoanResult,
    LoanedItem,
    RequestedItem,
    SupplyRequestResult,
)
from gvc.application.services.history_builder import (
    DEFAULT_COMMENDATION_DESCRIPTION,
    active_loans,
    build_history,
    change_event,
    commendation_event,
    concept_event,
    loan_event,
    supply_request_event,
)
from gvc.domain.enums import HistoryEventKind
from tests.factories import at

NOW = at(31)


def _change(id_: str, day: int | None, kind: str = "Advertência") -> DisciplinaryChangeResult:
    return DisciplinaryChangeResult(
        id=id_,
        kind=kind,
        description="Atraso no posto",
        remaining_days=365,
        created_at=at(day) if day else None,
    )


def _loan(id_: str, day: int | None, items: int) -> EquipmentLoanResult:
    return EquipmentLoanResult(
        id=id_,
        active_items=tuple(LoanedItem(item="apito", size="-", condition="Bom") for _ in range(items)),
        created_at=at(1),
        updated_at=at(day) if day else None,
    )


def _request(id_: str, day: int, status: str = "pendente") -> SupplyRequestResult:
    return SupplyRequestResult(
        id=id_,
        items=(
            RequestedItem(item="agasalho", size="M", delivered=False),
            RequestedItem(item="luva", size="G", delivered=True),
            RequestedItem(item="meia", size="-", delivered=False),
        ),
        status=status,
        created_at=at(day),
    )


class TestDescriptions:
    """Each category renders its own one-line description."""

    def test_change(self) -> None:
        event = change_event(_change("a", 2, kind="Suspensão"), NOW)
        assert event.description == "Suspensão: Atraso no posto"
        assert event.kind == HistoryEventKind.DISCIPLINARY_CHANGE

    def test_commendation_uses_title(self) -> None:
        c = CommendationResult(id="e", title="Salvamento", subject_ids=("g",), subject_names=("G",))
        assert commendation_event(c, NOW).description == "Salvamento"

    def test_commendation_without_title_uses_default(self) -> None:
        c = CommendationResult(id="e", title="", subject_ids=("g",), subject_names=("G",))
        assert commendation_event(c, NOW).description == DEFAULT_COMMENDATION_DESCRIPTION

    def test_concept(self) -> None:
        c = ConceptResult(id="k", label="Proatividade", polarity="Negativo", description="")
        assert concept_event(c, NOW).description == "Proatividade (Negativo)"

    def test_loan_counts_active_items(self) -> None:
        assert loan_event(_loan("l", 3, items=3), NOW).description == "Cautela de 3 item(ns)"

    def test_supply_request_counts_items_and_shows_status(self) -> None:
        event = supply_request_event(_request("s", 4, status="parcial"), NOW)
        assert event.description == "Solicitação de 3 item(ns) - parcial"


class TestTimestamps:
    def test_loan_uses_last_update_not_creation(self) -> None:
        loan = _loan("l", 20, items=1)
        assert loan_event(loan, NOW).timestamp == at(20)

    def test_missing_timestamp_uses_now(self) -> None:
        assert change_event(_change("a", None), NOW).timestamp == NOW
        assert loan_event(_loan("l", None, items=1), NOW).timestamp == NOW


def test_details_type_matches_kind() -> None:
    history = build_history(
        disciplinary_changes=[_change("a", 2)],
        commendations=[CommendationResult(id="e", title="t", subject_ids=(), subject_names=())],
        concepts=[ConceptResult(id="k", label="Assiduidade", polarity="Positivo", description="")],
        equipment_loans=[_loan("l", 3, items=1)],
        supply_requests=[_request("s", 4)],
        now=NOW,
    )
    assert {e.kind for e in history} == set(HistoryEventKind)
    for event in history:
        assert isinstance(event.details, DETAILS_TYPE_BY_KIND[event.kind])


def test_history_sorted_descending_and_excludes_empty_loans() -> None:
    loans = [_loan("active", 5, items=1), _loan("empty", 30, items=0)]
    history = build_history(
        disciplinary_changes=[_change("a", 2), _change("b", 9)],
        commendations=[],
        concepts=[],
        equipment_loans=loans,
        supply_requests=[_request("s", 7)],
        now=NOW,
    )
    assert [e.id for e in history] == ["b", "s", "active", "a"]
    assert all(history[i].timestamp >= history[i + 1].timestamp for i in range(len(history) - 1))
    assert [loan.id for loan in active_loans(loans)] == ["active"]


def test_empty_inputs_give_empty_history() -> None:
    assert build_history(
        disciplinary_changes=[],
        commendations=[],
        concepts=[],
        equipment_loans=[],
        supply_requests=[],
        now=NOW,
    ) == ()


def test_same_inputs_give_same_order() -> None:
    """Ties keep category order, so repeated builds are identical."""
    kwargs = dict(
        disciplinary_changes=[_change("a", 5), _change("b", 5)],
        commendations=[CommendationResult(id="e", title="t", subject_ids=(), subject_names=(), created_at=at(5))],
        concepts=[],
        equipment_loans=[_loan("l", 5, items=1)],
        supply_requests=[],
        now=NOW,
    )
    first = build_history(**kwargs)
    assert [e.id for e in first] == ["a", "b", "e", "l"]
    assert build_history(**kwargs) == first
