"""Core: configuration.

Single place for settings.
"""

from gvc.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
