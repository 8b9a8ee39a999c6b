from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass

from PySide6.QtCore import QSettings


@dataclass(frozen=True)
class SettingsKeys:
    UI_THEME: str = "ui/theme"
    UI_GEOMETRY: str = "ui/geometry"
    UI_SPLITTER: str = "ui/splitter_sizes"
    LAST_NOTE_ID: str = "nav/last_note_id"


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        return str(val) if val is not None else default
    except Exception:
        return default


def get_int_list(settings: QSettings, key: str) -> list[int]:
    """QSettings may hand back a list, a single value or "200,800" depending on backend."""
    val = settings.value(key)
    if val is None:
        return []
    if isinstance(val, str):
        val = val.replace(",", " ").split()
    elif not isinstance(val, (list, tuple)):
        val = [val]
    out: list[int] = []
    for x in val:
        try:
            out.append(int(x))
        except (TypeError, ValueError):
            pass
    return out


def safe_set_setting(settings: QSettings, key: str, value) -> None:
    """Best-effort запись в QSettings без падений UI."""
    try:
        settings.setValue(key, value)
    except Exception:
        pass


@contextmanager
def blocked_signals(obj):
    """
    Временно выключает Qt-сигналы у объекта и гарантированно включает обратно.
    """
    obj.blockSignals(True)
    try:
        yield
    finally:
        obj.blockSignals(False)
