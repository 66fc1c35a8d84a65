"""List GVCs in roster order."""

from __future__ import annotations

import logging

from gvc.application.dtos.profile import SubjectResult
from gvc.application.interfaces.repositories import IRecordStore
from gvc.application.services.record_mapper import subject_from_document
from gvc.core.constants import COLLECTION_SUBJECTS, FIELD_POSITION, FIELD_STATUS
from gvc.domain.enums import SubjectStatus
from gvc.domain.exceptions import FetchException, GVCException
from gvc.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)


class ListSubjectsUseCase:
    """Read all GVCs ordered by roster position (ascending), optionally by status."""

    def __init__(self, store: IRecordStore) -> None:
        self._store = store

    @traced("gvc.list_subjects")
    async def execute(
        self, status: SubjectStatus | None = None
    ) -> tuple[SubjectResult, ...]:
        try:
            if status is None:
                docs = await self._store.list_documents(
                    COLLECTION_SUBJECTS, order_by=FIELD_POSITION
                )
            else:
                docs = await self._store.query_documents(
                    COLLECTION_SUBJECTS,
                    FIELD_STATUS,
                    "==",
                    SubjectStatus(status).value,
                    order_by=FIELD_POSITION,
                    descending=False,
                )
        except GVCException:
            raise
        except Exception as e:
            logger.exception("Failed to list gvcs")
            raise FetchException(COLLECTION_SUBJECTS, str(e)) from e
        return tuple(subject_from_document(doc) for doc in docs)
