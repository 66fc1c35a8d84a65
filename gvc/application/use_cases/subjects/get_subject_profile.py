"""Aggregate a GVC's records into one profile with a merged history."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from gvc.application.dtos.profile import (
    CommendationResult,
    ConceptResult,
    DisciplinaryChangeResult,
    EquipmentLoanResult,
    SubjectProfile,
    SubjectResult,
    SupplyRequestResult,
)
from gvc.application.interfaces.repositories import IRecordStore, QueryOp
from gvc.application.services.history_builder import active_loans, build_history
from gvc.application.services.record_mapper import (
    commendation_from_document,
    concept_from_document,
    disciplinary_change_from_document,
    equipment_loan_from_document,
    subject_from_document,
    supply_request_from_document,
)
from gvc.core.constants import (
    COLLECTION_COMMENDATIONS,
    COLLECTION_CONCEPTS,
    COLLECTION_DISCIPLINARY_CHANGES,
    COLLECTION_EQUIPMENT_LOANS,
    COLLECTION_SUBJECTS,
    COLLECTION_SUPPLY_REQUESTS,
    FIELD_CREATED_AT,
    FIELD_REQUEST_CREATED_AT,
    FIELD_SUBJECT_ID,
    FIELD_SUBJECT_IDS,
    FIELD_UPDATED_AT,
)
from gvc.domain.exceptions import (
    FetchException,
    GVCException,
    SubjectNotFoundException,
    ValidationException,
)
from gvc.shared.telemetry.tracing import add_span_attributes, traced
from gvc.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GetSubjectProfileUseCase:
    """Build a SubjectProfile from six reads: the subject, then five record sets concurrently.

    All-or-nothing: if any read fails the whole call fails (the first failure
    cancels the reads still in flight) and no partial profile is returned.
    """

    def __init__(self, store: IRecordStore) -> None:
        self._store = store

    async def _get_subject(self, subject_id: str) -> SubjectResult:
        try:
            doc = await self._store.get_document(COLLECTION_SUBJECTS, subject_id)
        except GVCException:
            raise
        except Exception as e:
            logger.exception("Failed to fetch gvc %s", subject_id)
            raise FetchException(COLLECTION_SUBJECTS, str(e)) from e
        if doc is None:
            raise SubjectNotFoundException(subject_id)
        return subject_from_document(doc)

    async def _query(
        self,
        collection: str,
        field: str,
        op: QueryOp,
        subject_id: str,
        order_by: str,
        mapper: Callable[[dict[str, Any]], T],
    ) -> tuple[T, ...]:
        """Run one scoped query (newest first) and map its documents."""
        try:
            docs = await self._store.query_documents(
                collection, field, op, subject_id, order_by=order_by, descending=True
            )
        except GVCException:
            raise
        except Exception as e:
            logger.exception("Failed to fetch %s for gvc %s", collection, subject_id)
            raise FetchException(collection, str(e)) from e
        return tuple(mapper(doc) for doc in docs)

    @traced("gvc.get_subject_profile")
    async def execute(self, subject_id: str) -> SubjectProfile:
        """Return the full profile for one GVC.

        Args:
            subject_id: GVC document id.

        Returns:
            SubjectProfile with the five record sets (inactive loans removed)
            and the history sorted most recent first.

        Raises:
            ValidationException: subject_id is blank or contains "/".
            SubjectNotFoundException: no GVC with that id.
            FetchException: the subject read or any record-set read failed.
        """
        if not subject_id or not subject_id.strip():
            raise ValidationException("Subject id must not be empty", field="subject_id")
        if "/" in subject_id:
            raise ValidationException("Subject id must not contain '/'", field="subject_id")

        subject = await self._get_subject(subject_id)

        try:
            async with asyncio.TaskGroup() as tg:
                changes_task = tg.create_task(self._query(
                    COLLECTION_DISCIPLINARY_CHANGES, FIELD_SUBJECT_ID, "==",
                    subject_id, FIELD_CREATED_AT, disciplinary_change_from_document,
                ))
                commendations_task = tg.create_task(self._query(
                    COLLECTION_COMMENDATIONS, FIELD_SUBJECT_IDS, "array-contains",
                    subject_id, FIELD_CREATED_AT, commendation_from_document,
                ))
                concepts_task = tg.create_task(self._query(
                    COLLECTION_CONCEPTS, FIELD_SUBJECT_ID, "==",
                    subject_id, FIELD_CREATED_AT, concept_from_document,
                ))
                loans_task = tg.create_task(self._query(
                    COLLECTION_EQUIPMENT_LOANS, FIELD_SUBJECT_ID, "==",
                    subject_id, FIELD_UPDATED_AT, equipment_loan_from_document,
                ))
                requests_task = tg.create_task(self._query(
                    COLLECTION_SUPPLY_REQUESTS, FIELD_SUBJECT_ID, "==",
                    subject_id, FIELD_REQUEST_CREATED_AT, supply_request_from_document,
                ))
        except ExceptionGroup as eg:
            # Surface the read failure itself, not the task group wrapper.
            raise eg.exceptions[0]

        changes: tuple[DisciplinaryChangeResult, ...] = changes_task.result()
        commendations: tuple[CommendationResult, ...] = commendations_task.result()
        concepts: tuple[ConceptResult, ...] = concepts_task.result()
        loans: tuple[EquipmentLoanResult, ...] = active_loans(loans_task.result())
        requests: tuple[SupplyRequestResult, ...] = requests_task.result()

        history = build_history(
            disciplinary_changes=changes,
            commendations=commendations,
            concepts=concepts,
            equipment_loans=loans,
            supply_requests=requests,
            now=utc_now(),
        )
        logger.debug(
            "Profile for gvc %s: %d changes, %d commendations, %d concepts, "
            "%d active loans, %d supply requests",
            subject_id,
            len(changes),
            len(commendations),
            len(concepts),
            len(loans),
            len(requests),
        )
        add_span_attributes(history_size=len(history))
        return SubjectProfile(
            subject=subject,
            disciplinary_changes=changes,
            commendations=commendations,
            concepts=concepts,
            equipment_loans=loans,
            supply_requests=requests,
            history=history,
        )


async def fetch_subject_profile(store: IRecordStore, subject_id: str) -> SubjectProfile:
    """Convenience wrapper: GetSubjectProfileUseCase(store).execute(subject_id)."""
    return await GetSubjectProfileUseCase(store).execute(subject_id)
