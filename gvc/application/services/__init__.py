"""Application services: record mapping, history building, summaries."""

from gvc.application.services.history_builder import active_loans, build_history
from gvc.application.services.profile_summary import (
    summarize_profile,
    supply_status_label,
)

__all__ = [
    "active_loans",
    "build_history",
    "summarize_profile",
    "supply_status_label",
]
