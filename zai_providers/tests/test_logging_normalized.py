"""Focused tests for zai_providers.base.logging and the request log.

Covers:
- _parse_level string parsing
- _coerce_tokens stability
- normalized_log_event emits the required keys
- RequestLog events for batch and streaming calls, best-effort behavior
"""
from __future__ import annotations

import json
import logging

import httpx
import pytest

from zai_providers.base.errors import ErrorCode, ProviderError
from zai_providers.base.log_support import LogContext
from zai_providers.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    _coerce_tokens,  # type: ignore[attr-defined]
    _parse_level,  # type: ignore[attr-defined]
    configure_logger,
    get_logger,
    normalized_log_event,
)
from zai_providers.base.models import Message, Usage
from zai_providers.base.request_log import RequestLog
from zai_providers.tests.helpers import TrackingStream, scenario_c_frames, sse


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - exercised via tests
        self.messages.append(record.getMessage())


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_coerce_tokens_shapes():
    assert _coerce_tokens(None) is None  # nosec B101
    assert _coerce_tokens(Usage(1, 2)) == {"input": 1, "output": 2, "total": 3}  # nosec B101
    assert _coerce_tokens({"input": 1}) == {"input": 1}  # nosec B101
    assert _coerce_tokens(7) == {"value": "7"}  # nosec B101


def test_child_loggers_hang_under_base():
    assert get_logger("zai").name == "zai_providers.zai"  # nosec B101
    assert get_logger("zai_providers.zai").name == "zai_providers.zai"  # nosec B101


def test_normalized_log_event_emits_required_keys():
    logger = get_logger("tests.logging")
    handler = _ListHandler()
    logger.addHandler(handler)
    try:
        normalized_log_event(
            logger,
            "request.end",
            LogContext(provider="zai", model="glm-4.5"),
            phase="finalize",
            error_code="timeout",
            emitted=3,
            tokens=Usage(10, 5),
        )
    finally:
        logger.removeHandler(handler)
    payload = json.loads(handler.messages[-1])
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in payload  # nosec B101
    assert payload["event"] == "request.end"  # nosec B101
    assert payload["provider"] == "zai"  # nosec B101
    assert payload["tokens"] == {"input": 10, "output": 5, "total": 15}  # nosec B101


def test_error_code_omitted_when_none():
    logger = get_logger("tests.logging.none")
    handler = _ListHandler()
    logger.addHandler(handler)
    try:
        normalized_log_event(logger, "x", None, phase="start")
    finally:
        logger.removeHandler(handler)
    payload = json.loads(handler.messages[-1])
    assert "error_code" not in payload  # nosec B101
    assert payload["attempt"] is None  # nosec B101


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "providers.log"
    logger = configure_logger(level="DEBUG", file_path=str(path))
    try:
        get_logger("tests.file").warning(json.dumps({"event": "hello"}))
        for h in logger.handlers:
            h.flush()
        line = path.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["event"] == "hello"  # nosec B101
    finally:
        configure_logger(level="INFO", file_path=None)


def test_request_log_methods_are_best_effort():
    class _Boom(logging.Logger):
        def log(self, *args, **kwargs):  # noqa: D401
            raise RuntimeError("sink down")

    log = RequestLog.start(provider="zai", model="glm-4.5", payload={"messages": []}, logger=_Boom("boom"))
    err = ProviderError(code=ErrorCode.TRANSPORT, message="x", provider="zai")
    log.attempt(attempt=0, max_attempts=3, delay=1.0, error=err)
    log.write(Message.assistant("ok"), Usage(1, 1))
    log.error(err)


def test_batch_call_logs_start_attempts_and_end(make_zai, captured_logs, sleeps):
    statuses = iter([503, 200])

    def handler(request: httpx.Request) -> httpx.Response:
        status = next(statuses)
        if status != 200:
            return httpx.Response(status, text="unavailable")
        return httpx.Response(200, json={"content": [{"text": "OK"}], "usage": {"input_tokens": 5, "output_tokens": 1}})

    make_zai(handler).complete("sys", [Message.user("hi")])
    events = captured_logs.events()
    names = [e["event"] for e in events]
    assert names == ["request.start", "request.attempt", "request.attempt", "request.end"]  # nosec B101
    failed, succeeded = events[1], events[2]
    assert failed["attempt"] == 0 and failed["error_code"] == "unavailable"  # nosec B101
    assert failed["status"] == 503 and failed["retry_in"] == 1.0  # nosec B101
    assert succeeded["attempt"] == 1 and "error_code" not in succeeded  # nosec B101
    assert events[-1]["tokens"] == {"input": 5, "output": 1, "total": 6}  # nosec B101
    assert len({e["request_id"] for e in events}) == 1  # nosec B101
    assert "test-key" not in json.dumps(events)  # nosec B101


def test_failed_call_logs_error(make_zai, captured_logs):
    with pytest.raises(ProviderError):
        make_zai(lambda r: httpx.Response(400, text="bad")).complete("sys", [Message.user("hi")])
    last = captured_logs.events()[-1]
    assert last["event"] == "request.error"  # nosec B101
    assert last["error_code"] == "validation"  # nosec B101


def test_stream_call_logs_emitted_count(make_zai, captured_logs):
    body = TrackingStream([sse(*scenario_c_frames())])
    stream = make_zai(lambda r: httpx.Response(200, stream=body)).complete_streaming("sys", [Message.user("hi")])
    list(stream)
    end = captured_logs.events()[-1]
    assert end["event"] == "request.end"  # nosec B101
    assert end["mode"] == "stream"  # nosec B101
    assert end["emitted"] == 4  # nosec B101
