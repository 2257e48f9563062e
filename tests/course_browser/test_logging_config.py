from __future__ import annotations

import logging

from pythonjsonlogger import jsonlogger

from course_browser.logging_config import configure_logging


def _restore_root(handlers, level):
    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_json_by_default(monkeypatch):
    root = logging.getLogger()
    saved = (list(root.handlers), root.level)
    monkeypatch.delenv("COURSE_BROWSER_LOG_FORMAT", raising=False)
    try:
        configure_logging(level=logging.DEBUG)

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
    finally:
        _restore_root(*saved)


def test_configure_logging_plain_from_env(monkeypatch):
    root = logging.getLogger()
    saved = (list(root.handlers), root.level)
    monkeypatch.setenv("COURSE_BROWSER_LOG_FORMAT", "plain")
    monkeypatch.setenv("COURSE_BROWSER_LOG_LEVEL", "warning")
    try:
        configure_logging()

        assert root.level == logging.WARNING
        formatter = root.handlers[0].formatter
        assert not isinstance(formatter, jsonlogger.JsonFormatter)
    finally:
        _restore_root(*saved)
