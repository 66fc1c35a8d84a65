"""Print a GVC's profile summary and merged history from Firestore.

Usage:
    uv run python -m scripts.show_subject_profile <gvc_id>
Requires FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH.
Exits with status 1 when the GVC does not exist or a read fails.
"""

import asyncio
import sys

from gvc.application.services.profile_summary import (
    summarize_profile,
    supply_status_label,
)
from gvc.application.use_cases.subjects import GetSubjectProfileUseCase
from gvc.core.config import get_settings
from gvc.domain.exceptions import FetchException, ResourceNotFoundException
from gvc.infrastructure.firebase import close_firebase, get_firestore_client, init_firebase
from gvc.infrastructure.firebase.repositories import FirestoreRecordStore
from gvc.shared.telemetry import TelemetryConfig, setup_logging


async def main() -> None:
    """Aggregate one GVC and print the result."""
    if len(sys.argv) != 2:
        print("Usage: python -m scripts.show_subject_profile <gvc_id>", file=sys.stderr)
        sys.exit(2)
    gvc_id = sys.argv[1]

    setup_logging()
    settings = get_settings()
    telemetry = TelemetryConfig(
        settings.app_name, settings.app_version, enabled=settings.telemetry_enabled
    )
    telemetry.setup_telemetry(settings.telemetry_exporter)

    if not init_firebase():
        print("Firestore not configured", file=sys.stderr)
        sys.exit(1)
    client = get_firestore_client()
    try:
        profile = await GetSubjectProfileUseCase(FirestoreRecordStore(client)).execute(gvc_id)
    except ResourceNotFoundException:
        print(f"GVC not found: {gvc_id}", file=sys.stderr)
        sys.exit(1)
    except FetchException as e:
        print(f"Could not load GVC {gvc_id}: {e.message} ({e.details['reason']})", file=sys.stderr)
        sys.exit(1)
    finally:
        await close_firebase()
        telemetry.shutdown()

    subject = profile.subject
    summary = summarize_profile(profile)
    print(f"{subject.name} (posição {subject.position}, {subject.status})")
    if subject.fixed_post:
        print(f"Posto fixo: {subject.fixed_post}")
    print(
        f"Alterações: {summary.disciplinary_change_count} "
        f"({summary.warning_count} advertências, {summary.suspension_count} suspensões)"
    )
    print(f"Elogios: {summary.commendation_count}")
    print(
        f"Conceitos: {summary.concept_count} "
        f"({summary.positive_concept_count} positivos, {summary.negative_concept_count} negativos)"
    )
    print(
        f"Cautelas ativas: {summary.active_loan_count} "
        f"({summary.active_loaned_item_count} itens)"
    )
    print(f"Solicitações: {summary.supply_request_count}")
    for status, count in sorted(summary.supply_requests_by_status.items()):
        print(f"  {supply_status_label(status)}: {count}")
    print()
    print(f"Histórico ({summary.history_size})")
    for event in profile.history:
        print(f"  {event.timestamp:%Y-%m-%d %H:%M}  [{event.kind.value}] {event.description}")


if __name__ == "__main__":
    asyncio.run(main())
