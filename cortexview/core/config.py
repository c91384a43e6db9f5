# cortexview/core/config.py
from __future__ import annotations
from typing import Any
from PySide6.QtCore import QSettings
from app_config import apply_qsettings_org, DEFAULTS

class Settings:
    """
    Thin wrapper over QSettings with defaults and simple dict-like get/set.
    Keys are "group/name", e.g. "ui/animation_ms_in".
    """
    def __init__(self, qsettings: QSettings | None = None):
        if qsettings is None:
            apply_qsettings_org()
            qsettings = QSettings()
        self._qs = qsettings

    def default(self, key: str) -> Any:
        group, _, name = key.partition("/")
        values = DEFAULTS.get(group)
        return values.get(name) if isinstance(values, dict) else None

    def get(self, key: str, default: Any = None) -> Any:
        if default is None:
            default = self.default(key)
        val = self._qs.value(key, default)
        return val if val is not None else default

    def get_int(self, key: str, default: int | None = None) -> int:
        """Integer setting; values stored as strings (INI backends) are coerced."""
        fallback = default if default is not None else int(self.default(key) or 0)
        val = self.get(key, fallback)
        try:
            return int(val)
        except (TypeError, ValueError):
            return fallback

    def set(self, key: str, value: Any) -> None:
        self._qs.setValue(key, value)
        self._qs.sync()

def get_settings() -> Settings:
    return Settings()
