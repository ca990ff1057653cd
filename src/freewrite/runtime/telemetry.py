"""Logging and profiling for the editor, on top of telelog.

Presets are small records describing where log lines go. The TUI owns the
terminal, so every preset except ``development`` writes to a file.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "FREEWRITE_"
ROOT_LOGGER = "freewrite"


@dataclass(frozen=True)
class Preset:
    level: str
    console: bool = False
    log_file: Optional[str] = None
    json: bool = False


PRESET_TABLE: Dict[str, Preset] = {
    "development": Preset(level="DEBUG", console=True),
    "production": Preset(level="INFO", log_file="freewrite.log"),
    "performance": Preset(level="DEBUG", log_file="freewrite-perf.log", json=True),
}
PRESETS = tuple(PRESET_TABLE)

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.environ.get(ENV_PREFIX + name) or None


def _preset_from_env() -> Preset:
    return Preset(
        level=(_env("LOG_LEVEL") or "INFO").upper(),
        console=_env("LOG_FILE") is None,
        log_file=_env("LOG_FILE"),
    )


def _to_config(preset: Preset) -> Any:
    config = tl.Config()
    config.with_min_level(preset.level)
    config.with_console_output(preset.console)
    if preset.console:
        config.with_colored_output(_env("NO_COLOR") is None)
    log_file = _env("LOG_FILE") or preset.log_file
    if log_file and not preset.console:
        config.with_file_output(log_file)
        config.with_buffering(True)
    if preset.json:
        config.with_json_format(True)
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Install a telelog config, either given directly or built from a preset."""

    global _config
    if config is not None and preset is not None:
        raise ValueError("Pass `config` or `preset`, not both.")
    if preset is not None:
        if preset not in PRESET_TABLE:
            raise ValueError(f"Unknown preset '{preset}'.")
        config = _to_config(PRESET_TABLE[preset])
    _config = config if config is not None else _to_config(_preset_from_env())
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    if _config is None:
        configure()
    key = name or ROOT_LOGGER
    logger = _loggers.get(key)
    if logger is None:
        logger = _loggers[key] = tl.Logger.with_config(key, _config)
    return logger


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), str(value)) for key, value in data.items()]


def _log(logger: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, _pairs(data))
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` as key/value pairs."""

    _log(get_logger(logger_name), level.lower(), f"event::{name}", dict(data or {}))


@dataclass
class SpanHandle:
    span_name: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = value


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracked as a telelog component.

    ``component=True`` tracks the block under ``name``. ``metadata`` stays on
    the logger context while the block runs. A failing block logs
    ``span::fail`` with everything the handle collected, then re-raises.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(span_name=name, metadata=dict(metadata or {}))
    component_name = name if component is True else component or None

    with ExitStack() as stack:
        for key, value in (metadata or {}).items():
            log.add_context(key, str(value))
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            _log(
                log,
                "error",
                "span::fail",
                {"span": name, **handle.metadata, "reason": exc},
            )
            raise


__all__ = [
    "PRESETS",
    "Preset",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
