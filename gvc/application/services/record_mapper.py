"""Map raw store documents (dicts) to profile DTOs.

Documents are read permissively: missing fields become empty strings,
zero, or empty tuples, and unknown enum strings are kept as-is.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from gvc.application.dtos.profile import (
    CommendationResult,
    ConceptResult,
    DisciplinaryChangeResult,
    EquipmentLoanResult,
    LoanedItem,
    RequestedItem,
    SubjectResult,
    SupplyRequestResult,
)
from gvc.core.constants import (
    FIELD_CREATED_AT,
    FIELD_REQUEST_CREATED_AT,
    FIELD_REQUEST_UPDATED_AT,
    FIELD_UPDATED_AT,
)
from gvc.shared.utils.datetime import ensure_utc


def _timestamp(value: Any) -> datetime | None:
    """Return a UTC datetime for a stored timestamp (datetime or ISO8601 string)."""
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, str) and value:
        try:
            return ensure_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))
        except ValueError:
            return None
    return None


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _int(value: Any, default: int = 0) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def subject_from_document(doc: dict[str, Any]) -> SubjectResult:
    return SubjectResult(
        id=doc.get("id", ""),
        name=doc.get("nome", ""),
        position=_int(doc.get("posicao")),
        status=doc.get("status", ""),
        fixed_post=_optional_str(doc.get("postoFixo")),
        registration=_optional_str(doc.get("re")),
        created_at=_timestamp(doc.get(FIELD_CREATED_AT)),
        updated_at=_timestamp(doc.get(FIELD_UPDATED_AT)),
    )


def disciplinary_change_from_document(doc: dict[str, Any]) -> DisciplinaryChangeResult:
    suspension_days = doc.get("diasSuspensao")
    return DisciplinaryChangeResult(
        id=doc.get("id", ""),
        kind=doc.get("tipo", ""),
        description=doc.get("descricao", ""),
        remaining_days=_int(doc.get("diasRestantes")),
        suspension_days=_int(suspension_days) if suspension_days is not None else None,
        created_at=_timestamp(doc.get(FIELD_CREATED_AT)),
        created_by=_optional_str(doc.get("criadoPor")),
    )


def commendation_from_document(doc: dict[str, Any]) -> CommendationResult:
    return CommendationResult(
        id=doc.get("id", ""),
        title=doc.get("titulo") or "",
        subject_ids=tuple(doc.get("gvcIds") or ()),
        subject_names=tuple(doc.get("gvcNomes") or ()),
        description=_optional_str(doc.get("descricao")),
        created_at=_timestamp(doc.get(FIELD_CREATED_AT)),
        created_by=_optional_str(doc.get("criadoPor")),
    )


def concept_from_document(doc: dict[str, Any]) -> ConceptResult:
    return ConceptResult(
        id=doc.get("id", ""),
        label=doc.get("conceito", ""),
        polarity=doc.get("polaridade", ""),
        description=doc.get("descricao", ""),
        created_at=_timestamp(doc.get(FIELD_CREATED_AT)),
        created_by=_optional_str(doc.get("criadoPor")),
    )


def _loaned_item(raw: dict[str, Any]) -> LoanedItem:
    return LoanedItem(
        item=raw.get("item", ""),
        size=raw.get("tamanho", ""),
        condition=raw.get("condicao", ""),
        loaned_at=_timestamp(raw.get("dataEmprestimo")),
        note=_optional_str(raw.get("observacao")),
    )


def equipment_loan_from_document(doc: dict[str, Any]) -> EquipmentLoanResult:
    return EquipmentLoanResult(
        id=doc.get("id", ""),
        active_items=tuple(
            _loaned_item(raw) for raw in doc.get("itensAtivos") or () if isinstance(raw, dict)
        ),
        created_at=_timestamp(doc.get(FIELD_CREATED_AT)),
        updated_at=_timestamp(doc.get(FIELD_UPDATED_AT)),
    )


def _requested_item(raw: dict[str, Any]) -> RequestedItem:
    return RequestedItem(
        item=raw.get("item", ""),
        size=raw.get("tamanho", ""),
        delivered=bool(raw.get("entregue", False)),
        condition=_optional_str(raw.get("condicao")),
    )


def supply_request_from_document(doc: dict[str, Any]) -> SupplyRequestResult:
    return SupplyRequestResult(
        id=doc.get("id", ""),
        items=tuple(
            _requested_item(raw) for raw in doc.get("itens") or () if isinstance(raw, dict)
        ),
        status=doc.get("status", ""),
        created_at=_timestamp(doc.get(FIELD_REQUEST_CREATED_AT)),
        updated_at=_timestamp(doc.get(FIELD_REQUEST_UPDATED_AT)),
    )
