"""Tests for logging setup."""

from __future__ import annotations

import logging
import logging.handlers

from cortexview.core.logging import get_logger, log_file_for, setup_logging


def test_setup_logging_handlers(tmp_path, restore_root_logger) -> None:
    root = setup_logging(level=logging.WARNING, log_dir=tmp_path / "logs")

    assert root is logging.getLogger()
    assert root.level == logging.WARNING
    kinds = {type(h) for h in root.handlers}
    assert logging.handlers.RotatingFileHandler in kinds
    assert logging.StreamHandler in kinds
    assert (tmp_path / "logs").is_dir()


def test_reinit_does_not_duplicate(tmp_path, restore_root_logger) -> None:
    setup_logging(log_dir=tmp_path)
    setup_logging(log_dir=tmp_path)
    assert len(logging.getLogger().handlers) == 2


def test_messages_reach_file(tmp_path, restore_root_logger) -> None:
    setup_logging(level=logging.DEBUG, log_dir=tmp_path)
    get_logger("cortexview.test").debug("selection: none -> Layer IV")
    for h in logging.getLogger().handlers:
        h.flush()
    text = log_file_for(tmp_path).read_text(encoding="utf-8")
    assert "cortexview.test" in text
    assert "selection: none -> Layer IV" in text
