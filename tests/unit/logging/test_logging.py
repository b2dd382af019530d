"""Tests for logging utilities."""

import logging

from utilkit.logging import get_logger, reset_logger
from utilkit.logging.config import save_log_dir, save_log_level
from utilkit.logging.logging import _resolve_log_dir, get_configured_level


def test_reset_logger_allows_reconfiguration(tmp_path):
    log1 = tmp_path / "first.log"
    log2 = tmp_path / "second.log"

    logger = get_logger("test", log_file=log1, console=False)
    logger.info("first message")
    for handler in logger.handlers:
        handler.flush()

    assert "first message" in log1.read_text()

    reset_logger()
    assert logging.getLogger("test").handlers == []

    logger2 = get_logger("test", log_file=log2, console=False)
    logger2.info("second message")
    for handler in logger2.handlers:
        handler.flush()

    assert "second message" in log2.read_text()
    assert "second message" not in log1.read_text()
    reset_logger("test")


def test_get_logger_configures_once(tmp_path):
    logger = get_logger("once", log_file=tmp_path / "once.log", console=False)
    again = get_logger("once", log_file=tmp_path / "other.log", console=True)
    assert again is logger
    assert len(logger.handlers) == 1
    assert not (tmp_path / "other.log").exists()
    reset_logger("once")


def test_get_logger_uses_persisted_level(tmp_path, monkeypatch):
    config_file = tmp_path / "logging.json"
    monkeypatch.setenv("UTILKIT_LOG_CONFIG", str(config_file))
    save_log_level("WARNING")

    logger = get_logger("persisted", log_dir=tmp_path, console=False)
    assert logger.level == logging.WARNING
    assert get_configured_level("persisted") == "WARNING"
    reset_logger("persisted")


def test_explicit_level_wins_over_persisted(tmp_path, monkeypatch):
    monkeypatch.setenv("UTILKIT_LOG_CONFIG", str(tmp_path / "logging.json"))
    save_log_level("ERROR")

    logger = get_logger("explicit", level=logging.DEBUG, log_dir=tmp_path, console=False)
    assert logger.level == logging.DEBUG
    reset_logger("explicit")


def test_log_dir_resolution_order(tmp_path, monkeypatch):
    monkeypatch.setenv("UTILKIT_LOG_CONFIG", str(tmp_path / "logging.json"))
    monkeypatch.setenv("UTILKIT_LOG_DIR", str(tmp_path / "env"))
    save_log_dir(tmp_path / "persisted")

    assert _resolve_log_dir(tmp_path / "arg") == tmp_path / "arg"
    assert _resolve_log_dir() == tmp_path / "env"

    monkeypatch.delenv("UTILKIT_LOG_DIR")
    assert _resolve_log_dir() == tmp_path / "persisted"
