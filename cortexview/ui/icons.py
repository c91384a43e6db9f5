# cortexview/ui/icons.py
from __future__ import annotations
from typing import Optional

import qtawesome as qta

from cortexview.qt import QtGui
from cortexview.core.logging import get_logger

log = get_logger(__name__)

# Shown instead of the icon when the icon fonts can't be loaded
FALLBACK_GLYPHS = {
    "fa5s.brain": "🧠",
    "fa5s.chevron-circle-down": "▾",
    "fa5s.chevron-circle-right": "▸",
    "fa5s.users": "👥",
    "fa5s.calendar-alt": "📅",
    "fa5s.dna": "🧬",
}

_warned = False


def icon(name: str, color: QtGui.QColor) -> Optional[QtGui.QIcon]:
    """QtAwesome icon, or None if the font is unavailable (callers then use fallback_glyph)."""
    global _warned
    try:
        return qta.icon(name, color=color)
    except Exception as ex:
        if not _warned:
            log.warning("QtAwesome icons unavailable, using text glyphs: %s", ex)
            _warned = True
        return None


def fallback_glyph(name: str) -> str:
    return FALLBACK_GLYPHS.get(name, "•")
