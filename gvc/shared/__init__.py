"""Shared helpers: datetime utilities and telemetry."""
