from __future__ import annotations

import json
import logging

from designdiff.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    LogContext,
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def _capture():
    handler = _ListHandler()
    get_logger().addHandler(handler)
    return handler


def test_child_loggers_nest_under_base():
    assert get_logger("designdiff.openai").name == "designdiff.openai"  # nosec B101 - pytest assertion in tests
    assert get_logger("elsewhere").name == "designdiff.elsewhere"  # nosec B101 - pytest assertion in tests


def test_log_event_drops_none_and_merges_context():
    handler = _capture()
    try:
        log_event(get_logger("designdiff.t"), "x.start", LogContext(provider="openai"), keep=1, gone=None)
    finally:
        get_logger().removeHandler(handler)
    payload = json.loads(handler.records[-1].getMessage())
    assert payload == {"event": "x.start", "provider": "openai", "keep": 1}  # nosec B101 - pytest assertion in tests


def test_normalized_error_event_is_warning():
    handler = _capture()
    try:
        normalized_log_event(
            get_logger("designdiff.t"),
            "analyze.error",
            LogContext(provider="gemini", model="m", capability="analyze"),
            phase="error",
            error_code="rate_limit",
            latency_ms=12.3456,
        )
    finally:
        get_logger().removeHandler(handler)
    record = handler.records[-1]
    payload = json.loads(record.getMessage())
    assert record.levelno == logging.WARNING  # nosec B101 - pytest assertion in tests
    assert all(key in payload for key in REQUIRED_NORMALIZED_KEYS)  # nosec B101 - pytest assertion in tests
    assert payload["phase"] == "error" and payload["structured"] is True  # nosec B101 - pytest assertion in tests
    assert payload["error_code"] == "rate_limit"  # nosec B101 - pytest assertion in tests
    assert payload["latency_ms"] == 12.35  # nosec B101 - pytest assertion in tests
    assert payload["capability"] == "analyze"  # nosec B101 - pytest assertion in tests


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "designdiff.log"
    logger = configure_logger(file_path=str(path))
    try:
        log_event(get_logger("designdiff.t"), "file.check", ok=True)
    finally:
        configure_logger(file_path=None)
    line = path.read_text(encoding="utf-8").strip().splitlines()[-1]
    data = json.loads(line)
    assert data["event"] == "file.check" and data["ok"] is True  # nosec B101 - pytest assertion in tests
    assert not any(getattr(h, "baseFilename", None) == str(path) for h in logger.handlers)  # nosec B101 - pytest assertion in tests
