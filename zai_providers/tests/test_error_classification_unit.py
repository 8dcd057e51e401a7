from __future__ import annotations

import httpx
import pytest

from zai_providers.base.errors import (
    ErrorCode,
    ProviderError,
    classify_exception,
    code_for_status,
    code_for_vendor_error,
    error_from_exception,
    error_from_status,
)


class _WithStatus(Exception):
    def __init__(self, status_code: int):
        super().__init__(f"status {status_code}")
        self.status_code = status_code


@pytest.mark.parametrize(
    ("status", "code"),
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (403, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (429, ErrorCode.RATE_LIMIT),
        (503, ErrorCode.UNAVAILABLE),
        (529, ErrorCode.UNAVAILABLE),
        (599, ErrorCode.SERVER_ERROR),
        (418, ErrorCode.UNKNOWN),
    ],
)
def test_code_for_status(status, code):
    assert code_for_status(status) is code  # nosec B101


def test_code_for_vendor_error():
    assert code_for_vendor_error("overloaded_error") is ErrorCode.UNAVAILABLE  # nosec B101
    assert code_for_vendor_error("authentication_error") is ErrorCode.AUTH  # nosec B101
    assert code_for_vendor_error(None) is ErrorCode.UNKNOWN  # nosec B101


def test_classify_exception_precedence():
    req = httpx.Request("POST", "https://api.z.ai/x")
    assert classify_exception(httpx.ReadTimeout("slow", request=req)) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("refused", request=req)) is ErrorCode.TRANSPORT  # nosec B101
    assert classify_exception(_WithStatus(401)) is ErrorCode.AUTH  # nosec B101
    assert classify_exception(RuntimeError("rate limit exceeded")) is ErrorCode.RATE_LIMIT  # nosec B101
    assert classify_exception(RuntimeError("???")) is ErrorCode.UNKNOWN  # nosec B101
    err = ProviderError(code=ErrorCode.CONFLICT, message="x", provider="p")
    assert classify_exception(err) is ErrorCode.CONFLICT  # nosec B101


def test_error_from_exception_wraps_without_status():
    req = httpx.Request("POST", "https://api.z.ai/x")
    err = error_from_exception(httpx.ConnectError("refused", request=req), provider="zai", model="glm-4.5")
    assert err.code is ErrorCode.TRANSPORT  # nosec B101
    assert err.status is None  # nosec B101
    assert err.retryable  # nosec B101
    assert isinstance(err.raw, httpx.ConnectError)  # nosec B101


def test_error_from_status_truncates_body():
    err = error_from_status(500, "x" * 2000, provider="zai")
    assert err.status == 500  # nosec B101
    assert err.message == "API request failed with status 500"  # nosec B101
    assert len(err.body) <= 503  # nosec B101
    assert "status 500" in str(err)  # nosec B101


def test_stream_state_errors_are_transport():
    assert classify_exception(httpx.StreamClosed()) is ErrorCode.TRANSPORT  # nosec B101
    assert classify_exception(httpx.ResponseNotRead()) is ErrorCode.TRANSPORT  # nosec B101
