"""Pytest configuration and fixtures for the GVC dashboard.

Store-backed tests use InMemoryRecordStore seeded with the document
shapes from tests.factories. All imports use gvc.*.
"""

import pytest

from gvc.core.config import get_settings
from gvc.core.constants import (
    COLLECTION_COMMENDATIONS,
    COLLECTION_CONCEPTS,
    COLLECTION_DISCIPLINARY_CHANGES,
    COLLECTION_EQUIPMENT_LOANS,
    COLLECTION_SUBJECTS,
    COLLECTION_SUPPLY_REQUESTS,
)
from gvc.infrastructure.memory import InMemoryRecordStore
from tests.factories import (
    SUBJECT_ID,
    at,
    change_doc,
    commendation_doc,
    concept_doc,
    loan_doc,
    request_doc,
    subject_doc,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def empty_store() -> InMemoryRecordStore:
    """Store holding only the subject, with no records in any category."""
    store = InMemoryRecordStore()
    store.add(COLLECTION_SUBJECTS, SUBJECT_ID, subject_doc())
    return store


@pytest.fixture
def populated_store(empty_store: InMemoryRecordStore) -> InMemoryRecordStore:
    """Subject with records in every category, plus noise for another GVC."""
    store = empty_store
    store.add(COLLECTION_DISCIPLINARY_CHANGES, "alt-1", change_doc(at(10)))
    store.add(
        COLLECTION_DISCIPLINARY_CHANGES,
        "alt-2",
        change_doc(at(3), kind="Suspensão", diasSuspensao=2, descricao="Abandono de posto"),
    )
    store.add(COLLECTION_COMMENDATIONS, "elo-1", commendation_doc(at(8)))
    store.add(COLLECTION_CONCEPTS, "con-1", concept_doc(at(6)))
    store.add(COLLECTION_CONCEPTS, "con-2", concept_doc(at(4), polarity="Negativo"))
    store.add(COLLECTION_EQUIPMENT_LOANS, "cau-1", loan_doc(at(9), items=2))
    store.add(COLLECTION_EQUIPMENT_LOANS, "cau-empty", loan_doc(at(11), items=0))
    store.add(COLLECTION_SUPPLY_REQUESTS, "sol-1", request_doc(at(7), status="parcial"))
    store.add(COLLECTION_SUPPLY_REQUESTS, "sol-2", request_doc(at(2), status="concluida"))

    store.add(COLLECTION_SUBJECTS, "gvc-3", subject_doc(name="Carla Dias", posicao=3))
    store.add(COLLECTION_DISCIPLINARY_CHANGES, "alt-other", change_doc(at(12), gvcId="gvc-3"))
    store.add(COLLECTION_COMMENDATIONS, "elo-other", commendation_doc(at(12), gvcIds=["gvc-3"]))
    return store
