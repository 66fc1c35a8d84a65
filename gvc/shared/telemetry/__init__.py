"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from gvc.shared.telemetry.logging import setup_logging
from gvc.shared.telemetry.telemetry import TelemetryConfig
from gvc.shared.telemetry.tracing import (
    add_span_attributes,
    traced,
)

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "traced",
    "add_span_attributes",
]
