from __future__ import annotations

from types import SimpleNamespace

import pytest

from designdiff.base.errors import CredentialMissingError, ErrorCode, UpstreamCallFailedError
from designdiff.base.models import CodeFile, CodeGenOptions
from designdiff.base.vision_parts import ANALYZE, CODEGEN, PROBE, TECH_STACK, BaseVisionProvider


class _FakeVision(BaseVisionProvider):
    """Adapter whose SDK is a list of recorded calls."""

    name = "openai"
    default_model_name = "vision-default"
    default_text_model_name = "text-default"

    def __init__(self, *args, reply="{}", error=None, **kwargs):
        self.reply = reply
        self.error = error
        self.built = []
        self.sent = []
        super().__init__(*args, **kwargs)

    def _build_client(self, api_key):
        client = SimpleNamespace(api_key=api_key)
        self.built.append(client)
        return client

    def _complete(self, client, *, model, prompt, images, max_tokens):
        self.sent.append(
            SimpleNamespace(client=client, model=model, prompt=prompt, images=tuple(images), max_tokens=max_tokens)
        )
        if self.error is not None:
            raise self.error
        return self.reply


def test_model_selection_per_capability():
    p = _FakeVision(api_key="sk-live", config={})
    assert p.model_for(ANALYZE) == "vision-default"  # nosec B101 - pytest assertion in tests
    assert p.model_for(TECH_STACK) == "text-default"  # nosec B101 - pytest assertion in tests
    assert p.model_for(CODEGEN, "override") == "override"  # nosec B101 - pytest assertion in tests
    pinned = _FakeVision(api_key="sk-live", model="pinned", config={})
    assert pinned.model_for(ANALYZE) == pinned.model_for(PROBE) == "pinned"  # nosec B101 - pytest assertion in tests


def test_placeholder_key_is_not_a_credential():
    p = _FakeVision(api_key="your-api-key-here", config={"api_key": "changeme"})
    assert p.has_default_credential is False  # nosec B101 - pytest assertion in tests
    with pytest.raises(CredentialMissingError) as ei:
        p.analyze_images(b"a", b"b")
    assert ei.value.code is ErrorCode.AUTH  # nosec B101 - pytest assertion in tests
    assert ei.value.model == "vision-default"  # nosec B101 - pytest assertion in tests
    assert p.built == [] and p.sent == []  # nosec B101 - pytest assertion in tests


def test_default_client_built_once_and_reused():
    p = _FakeVision(config={"api_key": "sk-configured"})
    p.detect_tech_stack([CodeFile("App.tsx", "x")])
    p.generate_code(CodeGenOptions(framework="react", description="d"))
    assert len(p.built) == 1  # nosec B101 - pytest assertion in tests
    assert p.sent[0].client is p.sent[1].client  # nosec B101 - pytest assertion in tests
    assert p.sent[0].client.api_key == "sk-configured"  # nosec B101 - pytest assertion in tests


def test_override_key_scoped_to_the_call():
    p = _FakeVision(api_key="sk-default", config={})
    p.analyze_images(b"a", b"b", api_key="sk-override")
    p.analyze_images(b"a", b"b")
    assert [c.api_key for c in p.built] == ["sk-override", "sk-default"]  # nosec B101 - pytest assertion in tests
    assert p.sent[1].client.api_key == "sk-default"  # nosec B101 - pytest assertion in tests


def test_override_key_works_without_default_credential():
    p = _FakeVision(config={})
    assert p.analyze_images(b"a", b"b", api_key=" sk-call ") == "{}"  # nosec B101 - pytest assertion in tests
    assert p.built[0].api_key == "sk-call"  # nosec B101 - pytest assertion in tests


def test_capability_budgets_and_images():
    p = _FakeVision(api_key="sk-live", config={})
    p.analyze_images(b"cur", b"tgt", framework="vue")
    p.detect_tech_stack([CodeFile("main.dart", "void main() {}")])
    p.generate_code(CodeGenOptions(framework="react", description="d"))
    p.probe()
    analyze, tech, codegen, probe = p.sent
    assert analyze.images == (b"cur", b"tgt") and analyze.max_tokens == 4000  # nosec B101 - pytest assertion in tests
    assert "The project uses vue framework." in analyze.prompt  # nosec B101 - pytest assertion in tests
    assert tech.images == () and tech.max_tokens == 1000  # nosec B101 - pytest assertion in tests
    assert "File: main.dart" in tech.prompt  # nosec B101 - pytest assertion in tests
    assert codegen.max_tokens == 2000  # nosec B101 - pytest assertion in tests
    assert probe.max_tokens == 1 and probe.prompt == "Hello"  # nosec B101 - pytest assertion in tests


def test_sdk_exception_wrapped_with_classification():
    boom = RuntimeError("Rate limit exceeded, slow down")
    p = _FakeVision(api_key="sk-live", config={}, error=boom)
    with pytest.raises(UpstreamCallFailedError) as ei:
        p.generate_code(CodeGenOptions(framework="react", description="d"))
    err = ei.value
    assert err.code is ErrorCode.RATE_LIMIT and err.retryable is True  # nosec B101 - pytest assertion in tests
    assert err.raw is boom and err.__cause__ is boom  # nosec B101 - pytest assertion in tests
    assert err.model == "text-default"  # nosec B101 - pytest assertion in tests


def test_empty_reply_is_a_failure_except_for_probe():
    p = _FakeVision(api_key="sk-live", config={}, reply="   ")
    with pytest.raises(UpstreamCallFailedError) as ei:
        p.analyze_images(b"a", b"b")
    assert ei.value.message == "No response from openai"  # nosec B101 - pytest assertion in tests
    assert p.probe() is None  # nosec B101 - pytest assertion in tests
