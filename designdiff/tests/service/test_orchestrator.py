from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

import designdiff
from designdiff.base.errors import (
    ErrorCode,
    InputArityError,
    UnsupportedProviderError,
    UpstreamCallFailedError,
)
from designdiff.base.factory import AdapterInitError
from designdiff.base.models import AnalysisRequest, CodeFile, CodeGenOptions
from designdiff.service.orchestrator import AnalysisOrchestrator
from designdiff.tests.utils import JPEG_10x10, RecordingFactory, StubAdapter

FIXED = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

TECH_REPLY = (
    'Analysis: {"framework":"react","language":"typescript","platform":"web","confidence":0.9,'
    '"autoDetected":true,"detectedFiles":[{"filename":"App.tsx","type":"react-component","confidence":0.9}]}'
)


def _orch(adapter: StubAdapter) -> AnalysisOrchestrator:
    return AnalysisOrchestrator({adapter.name: adapter}, clock=lambda: FIXED)


@pytest.mark.parametrize("provider,env", [
    ("openai", "OPENAI_API_KEY"),
    ("anthropic", "ANTHROPIC_API_KEY"),
    ("gemini", "GEMINI_API_KEY"),
])
def test_missing_credential_degrades_for_every_provider(provider, env, jpeg_pair):
    result = AnalysisOrchestrator().analyze_images(*jpeg_pair, provider=provider)
    assert result.confidence == 0.0  # nosec B101 - pytest assertion in tests
    assert len(result.differences) == 1  # nosec B101 - pytest assertion in tests
    diff = result.differences[0]
    assert diff.type == "error" and diff.severity == "high"  # nosec B101 - pytest assertion in tests
    assert f"provider '{provider}'" in diff.description  # nosec B101 - pytest assertion in tests
    assert env in diff.description  # nosec B101 - pytest assertion in tests
    assert result.suggestions[0].estimated_effort == "manual"  # nosec B101 - pytest assertion in tests
    assert result.provider == provider and result.processed_at  # nosec B101 - pytest assertion in tests


def test_module_level_analyze_without_key_returns_error_difference():
    result = designdiff.analyze_images(JPEG_10x10, JPEG_10x10, provider="openai")
    assert result.confidence == 0.0  # nosec B101 - pytest assertion in tests
    assert [d.type for d in result.differences] == ["error"]  # nosec B101 - pytest assertion in tests
    assert result.model == "gpt-4o"  # nosec B101 - pytest assertion in tests


def test_unknown_provider_raises_before_any_adapter_is_built(jpeg_pair):
    factory = RecordingFactory(StubAdapter())
    orch = AnalysisOrchestrator(factory=factory)
    with pytest.raises(UnsupportedProviderError):
        orch.analyze_images(*jpeg_pair, provider="azure")
    with pytest.raises(UnsupportedProviderError):
        orch.detect_tech_stack([CodeFile("a.ts", "")], provider="")
    with pytest.raises(UnsupportedProviderError):
        AnalysisRequest(current=b"a", target=b"b", provider="vendorX")
    assert factory.created == []  # nosec B101 - pytest assertion in tests


def test_single_image_raises_arity_error():
    stub = StubAdapter("{}")
    with pytest.raises(InputArityError) as ei:
        _orch(stub).analyze_images(JPEG_10x10, b"")
    assert (ei.value.expected, ei.value.received) == (2, 1)  # nosec B101 - pytest assertion in tests
    with pytest.raises(InputArityError):
        AnalysisRequest.from_images([JPEG_10x10])
    assert stub.calls == []  # nosec B101 - pytest assertion in tests


def test_empty_code_file_list_raises_arity_error():
    stub = StubAdapter("{}")
    with pytest.raises(InputArityError):
        _orch(stub).detect_tech_stack([])
    assert stub.calls == []  # nosec B101 - pytest assertion in tests


def test_analysis_parsed_and_annotated(jpeg_pair):
    reply = json.dumps({
        "differences": [{"type": "color", "severity": "high", "description": "CTA color"}],
        "suggestions": [{"type": "css", "code": ".cta{}", "estimatedEffort": "quick"}],
        "confidence": 0.85,
        "provider": "spoofed",
        "processedAt": "1999-01-01",
    })
    stub = StubAdapter(reply)
    result = _orch(stub).analyze_images(*jpeg_pair, framework="react", model="gpt-4o-mini", api_key="sk-call")
    assert result.confidence == 0.85  # nosec B101 - pytest assertion in tests
    assert result.differences[0].id == "1"  # nosec B101 - pytest assertion in tests
    assert result.provider == "openai" and result.model == "gpt-4o-mini"  # nosec B101 - pytest assertion in tests
    assert result.processed_at == FIXED.isoformat()  # nosec B101 - pytest assertion in tests
    capability, kwargs = stub.calls[0]
    assert capability == "analyze"  # nosec B101 - pytest assertion in tests
    assert kwargs["api_key"] == "sk-call" and kwargs["framework"] == "react"  # nosec B101 - pytest assertion in tests
    wire = result.to_dict()
    assert wire["processedAt"] == FIXED.isoformat()  # nosec B101 - pytest assertion in tests
    assert wire["suggestions"][0]["estimatedEffort"] == "quick"  # nosec B101 - pytest assertion in tests


def test_unstructured_reply_falls_back(jpeg_pair):
    result = _orch(StubAdapter("The header is bigger.")).analyze_images(*jpeg_pair)
    assert result.confidence == 0.7  # nosec B101 - pytest assertion in tests
    assert result.differences[0].description == "The header is bigger...."  # nosec B101 - pytest assertion in tests
    assert result.raw_analysis == "The header is bigger."  # nosec B101 - pytest assertion in tests


def test_upstream_failure_degrades(jpeg_pair):
    err = UpstreamCallFailedError(code=ErrorCode.RATE_LIMIT, message="too many requests", provider="openai")
    result = _orch(StubAdapter(error=err)).analyze_images(*jpeg_pair)
    assert result.confidence == 0.0  # nosec B101 - pytest assertion in tests
    assert result.differences[0].description == "AI analysis failed (rate_limit): too many requests"  # nosec B101 - pytest assertion in tests


def test_non_provider_exception_degrades_as_internal(jpeg_pair):
    result = _orch(StubAdapter(error=RuntimeError("kaput"))).analyze_images(*jpeg_pair)
    assert result.confidence == 0.0  # nosec B101 - pytest assertion in tests
    assert "(internal)" in result.differences[0].description  # nosec B101 - pytest assertion in tests


def test_adapter_init_failure_degrades_as_unavailable(jpeg_pair):
    class _BrokenFactory:
        def create(self, provider, **kwargs):
            raise AdapterInitError("sdk import failed")

    result = AnalysisOrchestrator(factory=_BrokenFactory()).analyze_images(*jpeg_pair, provider="gemini")
    assert result.confidence == 0.0  # nosec B101 - pytest assertion in tests
    assert "(unavailable)" in result.differences[0].description  # nosec B101 - pytest assertion in tests


def test_adapters_are_created_once_per_provider(jpeg_pair):
    factory = RecordingFactory(StubAdapter("{}"))
    orch = AnalysisOrchestrator(factory=factory)
    orch.analyze_images(*jpeg_pair, provider="openai")
    orch.detect_tech_stack([CodeFile("a.ts", "")], provider="OpenAI")
    assert len(factory.created) == 1  # nosec B101 - pytest assertion in tests


def test_tech_stack_end_to_end_parse():
    stub = StubAdapter(TECH_REPLY)
    result = _orch(stub).detect_tech_stack([{"filename": "App.tsx", "content": "export const x = 1"}])
    assert result.framework == "react" and result.language == "typescript"  # nosec B101 - pytest assertion in tests
    assert result.detected_files[0].type == "react-component"  # nosec B101 - pytest assertion in tests
    sent = stub.calls[0][1]["code_files"]
    assert sent == [CodeFile("App.tsx", "export const x = 1")]  # nosec B101 - pytest assertion in tests


def test_tech_stack_is_idempotent_apart_from_timestamp():
    ticks = iter([datetime(2024, 1, 1, tzinfo=timezone.utc), datetime(2024, 1, 2, tzinfo=timezone.utc)])
    orch = AnalysisOrchestrator({"openai": StubAdapter(TECH_REPLY)}, clock=lambda: next(ticks))
    files = [CodeFile("App.tsx", "export const x = 1")]
    first = orch.detect_tech_stack(files)
    second = orch.detect_tech_stack(files)
    assert first.processed_at != second.processed_at  # nosec B101 - pytest assertion in tests
    assert first.model_dump(exclude={"processed_at"}) == second.model_dump(exclude={"processed_at"})  # nosec B101 - pytest assertion in tests


def test_tech_stack_degraded_without_credential():
    result = AnalysisOrchestrator().detect_tech_stack([CodeFile("main.dart", "")], provider="anthropic")
    assert result.confidence == 0.0 and result.framework == "unknown"  # nosec B101 - pytest assertion in tests
    assert "ANTHROPIC_API_KEY" in (result.reasoning or "")  # nosec B101 - pytest assertion in tests


def test_codegen_fills_framework_and_falls_back():
    options = CodeGenOptions(framework="vue", description="Round the corners")
    parsed = _orch(StubAdapter('{"suggestions":[{"file":"a.vue","code":"<template/>"}]}')).generate_code(options)
    assert parsed.framework == "vue"  # nosec B101 - pytest assertion in tests
    assert parsed.suggestions[0].file == "a.vue"  # nosec B101 - pytest assertion in tests

    raw = "Just add border-radius: 8px"
    fallback = _orch(StubAdapter(raw)).generate_code(options)
    assert fallback.confidence == 0.7  # nosec B101 - pytest assertion in tests
    assert [s.type for s in fallback.suggestions] == ["manual"]  # nosec B101 - pytest assertion in tests
    assert fallback.suggestions[0].code == raw  # nosec B101 - pytest assertion in tests


def test_codegen_degraded_without_credential():
    options = CodeGenOptions(framework="react", description="Match hero")
    result = AnalysisOrchestrator().generate_code(options, provider="google")
    assert result.confidence == 0.0  # nosec B101 - pytest assertion in tests
    assert result.provider == "gemini" and result.model == "gemini-2.0-flash"  # nosec B101 - pytest assertion in tests
    assert result.suggestions[0].description == "Implement manually: Match hero"  # nosec B101 - pytest assertion in tests


def test_deeply_nested_reply_degrades_to_fallback(jpeg_pair):
    text = '{"differences": ' + "[" * 1200 + "]" * 1200 + "}"
    result = _orch(StubAdapter(text)).analyze_images(*jpeg_pair)
    assert result.confidence == 0.7  # nosec B101 - pytest assertion in tests
    assert [d.type for d in result.differences] == ["analysis"]  # nosec B101 - pytest assertion in tests
    assert result.provider == "openai"  # nosec B101 - pytest assertion in tests
