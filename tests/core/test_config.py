"""Tests for the QSettings wrapper."""

from __future__ import annotations

from app_config import DEFAULTS


def test_defaults_when_unset(settings) -> None:
    assert settings.get("ui/animation_ms_in") == DEFAULTS["ui"]["animation_ms_in"]
    assert settings.get_int("ui/window_width") == DEFAULTS["ui"]["window_width"]


def test_unknown_key_without_default(settings) -> None:
    assert settings.get("ui/nope") is None
    assert settings.get("nogroup/nope", "x") == "x"


def test_set_then_get_int_from_ini_string(settings) -> None:
    settings.set("ui/window_height", "900")
    assert settings.get_int("ui/window_height") == 900


def test_bad_int_falls_back(settings) -> None:
    settings.set("ui/animation_ms_out", "fast")
    assert settings.get_int("ui/animation_ms_out") == DEFAULTS["ui"]["animation_ms_out"]
