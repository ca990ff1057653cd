from __future__ import annotations

from freewrite.runtime import FONT_SIZES, EditorSettings


def test_defaults_are_lato_at_eighteen() -> None:
    settings = EditorSettings()

    assert settings.font.label == "Lato"
    assert settings.font_size == 18
    assert settings.label == "18px • Lato"


def test_font_size_cycles_and_wraps() -> None:
    settings = EditorSettings().with_font_size(FONT_SIZES[-1])

    assert settings.next_font_size().font_size == FONT_SIZES[0]
    assert EditorSettings().next_font_size().font_size == 20


def test_unknown_font_size_falls_back_to_smallest() -> None:
    assert EditorSettings().with_font_size(17).font_size == 16


def test_from_env_overrides() -> None:
    settings = EditorSettings.from_env(
        {
            "FREEWRITE_FONT": "serif",
            "FREEWRITE_FONT_SIZE": "24",
            "FREEWRITE_TELEMETRY_PRESET": "Development",
        }
    )

    assert settings.font.family == "Times New Roman"
    assert settings.font_size == 24
    assert settings.telemetry_preset == "development"


def test_from_env_ignores_bad_values() -> None:
    settings = EditorSettings.from_env(
        {
            "FREEWRITE_FONT": "Comic",
            "FREEWRITE_FONT_SIZE": "huge",
            "FREEWRITE_TELEMETRY_PRESET": "verbose",
        }
    )

    assert settings == EditorSettings()
