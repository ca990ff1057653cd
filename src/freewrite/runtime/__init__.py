"""Runtime services: telemetry and settings."""

from . import telemetry
from .settings import EditorSettings, FontChoice, FONTS, FONT_SIZES

__all__ = ["telemetry", "EditorSettings", "FontChoice", "FONTS", "FONT_SIZES"]
