"""Editor presentation settings and their environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Tuple

from .telemetry import ENV_PREFIX, PRESETS

FONT_SIZES: Tuple[int, ...] = (16, 18, 20, 22, 24, 26)
DEFAULT_FONT_SIZE = 18


@dataclass(frozen=True, slots=True)
class FontChoice:
    """A selectable font: the label shown to the user and the family name."""

    label: str
    family: str


FONTS: Tuple[FontChoice, ...] = (
    FontChoice("Lato", "Lato-Regular"),
    FontChoice("Arial", "Arial"),
    FontChoice("System", ".AppleSystemUIFont"),
    FontChoice("Serif", "Times New Roman"),
)


@dataclass(frozen=True, slots=True)
class EditorSettings:
    font: FontChoice = FONTS[0]
    font_size: int = DEFAULT_FONT_SIZE
    font_sizes: Tuple[int, ...] = FONT_SIZES
    telemetry_preset: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorSettings":
        env = os.environ if environ is None else environ
        settings = cls()
        font_label = env.get(f"{ENV_PREFIX}FONT")
        if font_label:
            settings = settings.with_font(font_label)
        raw_size = env.get(f"{ENV_PREFIX}FONT_SIZE")
        if raw_size:
            try:
                settings = settings.with_font_size(int(raw_size))
            except ValueError:
                pass
        preset = env.get(f"{ENV_PREFIX}TELEMETRY_PRESET")
        if preset and preset.lower() in PRESETS:
            settings = replace(settings, telemetry_preset=preset.lower())
        return settings

    def with_font(self, label: str) -> "EditorSettings":
        """Select a font by label (case-insensitive); unknown labels are ignored."""

        for choice in FONTS:
            if choice.label.lower() == label.lower():
                return replace(self, font=choice)
        return self

    def with_font_size(self, size: int) -> "EditorSettings":
        if size not in self.font_sizes:
            return replace(self, font_size=self.font_sizes[0])
        return replace(self, font_size=size)

    def next_font_size(self) -> "EditorSettings":
        """Advance to the next size, wrapping after the largest one."""

        try:
            index = self.font_sizes.index(self.font_size)
        except ValueError:
            return replace(self, font_size=self.font_sizes[0])
        return replace(
            self, font_size=self.font_sizes[(index + 1) % len(self.font_sizes)]
        )

    @property
    def label(self) -> str:
        return f"{self.font_size}px • {self.font.label}"


__all__ = ["EditorSettings", "FontChoice", "FONTS", "FONT_SIZES", "DEFAULT_FONT_SIZE"]
