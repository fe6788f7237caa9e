from __future__ import annotations

import types

from designdiff.base.errors import (
    CredentialMissingError,
    ErrorCode,
    ProviderError,
    UpstreamCallFailedError,
    classify_exception,
)


def test_classify_provider_error_passthrough():
    e = ProviderError(code=ErrorCode.AUTH, message="nope", provider="x")
    assert classify_exception(e) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests


def test_classify_http_status_mapping():
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101 - assert is appropriate in unit tests
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE  # nosec B101 - assert is appropriate in unit tests
    e3 = types.SimpleNamespace(code=429)
    assert classify_exception(e3) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests


class _CodedError(Exception):
    code = "vendor_specific_code"


def test_string_code_attribute_is_not_a_status():
    e = _CodedError("boom")
    assert classify_exception(e) is ErrorCode.UNKNOWN  # nosec B101 - assert is appropriate in unit tests


def test_classify_timeouts():
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests


def test_classify_heuristics():
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("timed out waiting")) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("Incorrect API key provided")) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("unsupported parameter")) is ErrorCode.UNSUPPORTED  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN  # nosec B101 - assert is appropriate in unit tests


def test_error_defaults_and_str():
    missing = CredentialMissingError(provider="openai")
    assert missing.code is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests
    upstream = UpstreamCallFailedError(provider="gemini", model="gemini-1.5-pro", message="boom")
    assert str(upstream) == "gemini:gemini-1.5-pro unknown: boom"  # nosec B101 - assert is appropriate in unit tests
