"""Tests for mapping stored documents to profile DTOs."""

from datetime import UTC, datetime, timedelta, timezone

from gvc.application.services.record_mapper import (
    commendation_from_document,
    concept_from_document,
    disciplinary_change_from_document,
    equipment_loan_from_document,
    subject_from_document,
    supply_request_from_document,
)
from gvc.domain.enums import DisciplinaryKind, ItemCondition, SubjectStatus
from tests.factories import at, change_doc, commendation_doc, loan_doc, request_doc, subject_doc


def test_subject_fields() -> None:
    subject = subject_from_document({"id": "g1", **subject_doc()})
    assert subject.id == "g1"
    assert subject.name == "Ana Souza"
    assert subject.position == 1
    assert subject.status == SubjectStatus.ACTIVE
    assert subject.fixed_post == "Posto 5"
    assert subject.registration == "12345"
    assert subject.updated_at == at(2)


def test_subject_optional_fields_absent() -> None:
    subject = subject_from_document({"id": "g1", "nome": "Sem Posto", "postoFixo": ""})
    assert subject.fixed_post is None
    assert subject.registration is None
    assert subject.position == 0
    assert subject.created_at is None


def test_suspension_change() -> None:
    change = disciplinary_change_from_document(
        {"id": "a1", **change_doc(at(3), kind="Suspensão", diasSuspensao=5, criadoPor="chefe@gvc")}
    )
    assert change.kind == DisciplinaryKind.SUSPENSION
    assert change.suspension_days == 5
    assert change.remaining_days == 365
    assert change.created_by == "chefe@gvc"
    assert change.created_at == at(3)


def test_warning_has_no_suspension_days() -> None:
    change = disciplinary_change_from_document({"id": "a1", **change_doc(at(3))})
    assert change.suspension_days is None


def test_commendation_members_are_tuples() -> None:
    commendation = commendation_from_document({"id": "e1", **commendation_doc(at(4))})
    assert commendation.subject_ids == ("gvc-1", "gvc-2")
    assert commendation.subject_names == ("Ana Souza", "Bruno Lima")
    assert commendation.description is None


def test_concept_keeps_unknown_label() -> None:
    concept = concept_from_document({"id": "k", "conceito": "Novo Conceito", "polaridade": "Positivo"})
    assert concept.label == "Novo Conceito"
    assert concept.description == ""


def test_loan_items() -> None:
    loan = equipment_loan_from_document({"id": "c1", **loan_doc(at(9), items=2)})
    assert loan.is_active
    assert len(loan.active_items) == 2
    assert loan.active_items[0].condition == ItemCondition.GOOD
    assert loan.active_items[0].loaned_at == at(1)
    assert loan.updated_at == at(9)


def test_loan_without_items_field_is_inactive() -> None:
    loan = equipment_loan_from_document({"id": "c1", "gvcId": "g"})
    assert loan.active_items == ()
    assert not loan.is_active


def test_supply_request_uses_feminine_timestamp_fields() -> None:
    request = supply_request_from_document(
        {"id": "s1", **request_doc(at(7), status="parcial"), "atualizadaEm": at(8)}
    )
    assert request.created_at == at(7)
    assert request.updated_at == at(8)
    assert [i.delivered for i in request.items] == [False, True]
    assert request.status == "parcial"


def test_timestamps_normalized_to_utc() -> None:
    naive = datetime(2025, 1, 5, 12, 0, 0)
    offset = datetime(2025, 1, 5, 9, 0, 0, tzinfo=timezone(timedelta(hours=-3)))
    assert disciplinary_change_from_document({"id": "a", "criadoEm": naive}).created_at == at(5)
    assert disciplinary_change_from_document({"id": "a", "criadoEm": offset}).created_at == at(5)
    assert disciplinary_change_from_document(
        {"id": "a", "criadoEm": "2025-01-05T12:00:00Z"}
    ).created_at == datetime(2025, 1, 5, 12, tzinfo=UTC)


def test_unparseable_timestamp_treated_as_missing() -> None:
    assert disciplinary_change_from_document({"id": "a", "criadoEm": "ontem"}).created_at is None
    assert disciplinary_change_from_document({"id": "a", "criadoEm": 1736078400}).created_at is None
