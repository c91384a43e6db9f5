"""
Application configuration settings
Do not modify these values once your application has been distributed to users.
This file centralises brand, paths and runtime defaults.
"""

from __future__ import annotations
import logging
import os
import platform
from pathlib import Path

# ───────────────────────────────────────────────────────────────────────────────
# Core identity
# ───────────────────────────────────────────────────────────────────────────────
APP_NAME = "Cortex View"
APP_VERSION = "0.1.0"
COMPANY_NAME = "Cortex View Developers"

# Reverse-DNS App ID (used in About/QSettings/diagnostics)
APP_ID = "org.cortexview.neocortex-layers"

# Organization identifiers (for QSettings, folders)
ORG_NAME = "Cortex View"        # human readable
ORG_DIRNAME = "CortexView"      # filesystem safe (no spaces)
ORG_DOMAIN = "cortexview.org"
APP_DIRNAME = "NeocortexLayers"  # per-app data folder under ORG_DIRNAME

TAGLINE = "The six layers of the neocortex, one tap at a time."

# Build metadata (optional, stamped by CI)
BUILD_COMMIT = os.getenv("CORTEXVIEW_BUILD_COMMIT", "")[:7]
BUILD_CHANNEL = os.getenv("CORTEXVIEW_BUILD_CHANNEL", "dev")  # dev/beta/stable


def version_string() -> str:
    """Human-friendly version string for About dialogs and logs."""
    meta = f"+{BUILD_COMMIT}" if BUILD_COMMIT else ""
    chan = f" ({BUILD_CHANNEL})" if BUILD_CHANNEL and BUILD_CHANNEL != "stable" else ""
    return f"{APP_VERSION}{meta}{chan}"


# ───────────────────────────────────────────────────────────────────────────────
# Runtime switches
# ───────────────────────────────────────────────────────────────────────────────
def log_level() -> int:
    """Level from CORTEXVIEW_LOG_LEVEL; DEBUG on the dev channel, INFO otherwise."""
    default = "DEBUG" if BUILD_CHANNEL == "dev" else "INFO"
    name = os.getenv("CORTEXVIEW_LOG_LEVEL", default).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def animations_enabled() -> bool:
    """Row expand/collapse animations; any value in CORTEXVIEW_NO_ANIMATIONS turns them off."""
    return not os.getenv("CORTEXVIEW_NO_ANIMATIONS", "")


# ───────────────────────────────────────────────────────────────────────────────
# User data locations (settings, logs)
# ───────────────────────────────────────────────────────────────────────────────
def _appdata_base() -> Path:
    system = platform.system()
    if system == "Windows":
        base = os.getenv("APPDATA") or (Path.home() / "AppData" / "Roaming")
    elif system == "Darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
    return Path(base) / ORG_DIRNAME / APP_DIRNAME


APPDATA_DIR = _appdata_base()
LOG_DIR = APPDATA_DIR / "logs"


def ensure_app_dirs() -> None:
    """Create required folders if they don't exist."""
    for p in (APPDATA_DIR, LOG_DIR):
        p.mkdir(parents=True, exist_ok=True)


# ───────────────────────────────────────────────────────────────────────────────
# QSettings bootstrap (call once during startup)
# ───────────────────────────────────────────────────────────────────────────────
def apply_qsettings_org() -> None:
    """
    Apply org/app metadata for QSettings. Call early in startup,
    before constructing your first QSettings instance.
    """
    from PySide6.QtCore import QCoreApplication
    QCoreApplication.setOrganizationName(ORG_NAME)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_NAME)


# ───────────────────────────────────────────────────────────────────────────────
# Defaults / UI hints (read by settings wrapper; safe to change before shipping)
# ───────────────────────────────────────────────────────────────────────────────
DEFAULTS = {
    "ui": {
        "window_width": 480,
        "window_height": 820,
        "animation_ms_in": 250,    # details slide/fade in
        "animation_ms_out": 200,   # details fade out
    },
}

WINDOW_TITLE = "Cortex Development 🧠"


# ───────────────────────────────────────────────────────────────────────────────
# Convenience banner for logs / about dialog
# ───────────────────────────────────────────────────────────────────────────────
def banner() -> str:
    return (
        f"{APP_NAME} {version_string()}  •  {APP_ID}\n"
        f"{TAGLINE}\n"
        f"Vendor: {COMPANY_NAME}\n"
        f"Data: {APPDATA_DIR}"
    )


if __name__ == "__main__":
    # Quick sanity check when run directly
    ensure_app_dirs()
    print(banner())
    print("Logs:", LOG_DIR)
