"""Runtime services: telemetry and environment-driven settings."""

from . import telemetry
from .settings import EditorSettings, get_settings, load_settings, reset_settings

__all__ = [
    "EditorSettings",
    "get_settings",
    "load_settings",
    "reset_settings",
    "telemetry",
]
