"""Listener settings stored via QSettings."""
from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QSettings

DEFAULT_PORT = 6667
DEFAULT_HOST = "0.0.0.0"
DEFAULT_BUFFER_SIZE = 1024


@dataclass
class ListenerSettings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    buffer_size: int = DEFAULT_BUFFER_SIZE
    debug_log: bool = False


def clamp_port(value: int) -> int:
    return max(1, min(65535, int(value)))


def _clamp_buffer_size(value: int) -> int:
    return max(16, min(65535, int(value)))


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, str):
        return value.lower() in {"1", "true", "yes", "on"}
    return bool(value)


def open_settings() -> QSettings:
    return QSettings("beacon", "listener")


def load_settings(qsettings: QSettings) -> ListenerSettings:
    """Load listener settings from QSettings."""

    port_raw = qsettings.value("listener/port", DEFAULT_PORT)
    host = qsettings.value("listener/host", DEFAULT_HOST)
    buffer_raw = qsettings.value("listener/buffer_size", DEFAULT_BUFFER_SIZE)
    debug_log_raw = qsettings.value("listener/debug_log", False)

    try:
        port = clamp_port(int(port_raw))
    except (TypeError, ValueError):
        port = DEFAULT_PORT

    try:
        buffer_size = _clamp_buffer_size(int(buffer_raw))
    except (TypeError, ValueError):
        buffer_size = DEFAULT_BUFFER_SIZE

    if not isinstance(host, str) or not host:
        host = DEFAULT_HOST

    return ListenerSettings(
        port=port,
        host=host,
        buffer_size=buffer_size,
        debug_log=_parse_bool(debug_log_raw),
    )


def save_settings(qsettings: QSettings, settings: ListenerSettings) -> None:
    """Persist listener settings to QSettings."""

    qsettings.setValue("listener/port", clamp_port(settings.port))
    qsettings.setValue("listener/host", settings.host or DEFAULT_HOST)
    qsettings.setValue("listener/buffer_size", _clamp_buffer_size(settings.buffer_size))
    qsettings.setValue("listener/debug_log", bool(settings.debug_log))
