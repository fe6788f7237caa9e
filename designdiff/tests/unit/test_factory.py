from __future__ import annotations

import pytest

from designdiff.anthropic import AnthropicProvider
from designdiff.base.errors import UnsupportedProviderError
from designdiff.base.factory import AdapterInitError, ProviderFactory, create_provider
from designdiff.base.models import ProviderName
from designdiff.gemini import GeminiProvider
from designdiff.openai import OpenAIProvider


def test_supported_providers():
    assert ProviderFactory.supported() == ("openai", "anthropic", "gemini")  # nosec B101 - pytest assertion in tests


@pytest.mark.parametrize(
    "name,klass",
    [
        ("openai", OpenAIProvider),
        ("OpenAI ", OpenAIProvider),
        ("anthropic", AnthropicProvider),
        ("claude", AnthropicProvider),
        ("gemini", GeminiProvider),
        ("google", GeminiProvider),
        (ProviderName.GEMINI, GeminiProvider),
    ],
)
def test_create_resolves_names_and_aliases(name, klass):
    adapter = ProviderFactory.create(name, config={})
    assert isinstance(adapter, klass)  # nosec B101 - pytest assertion in tests


@pytest.mark.parametrize("name", ["azure", "", None, "vendorX"])
def test_unknown_provider_raises(name):
    with pytest.raises(UnsupportedProviderError):
        ProviderFactory.create(name)


def test_bad_constructor_arguments():
    with pytest.raises(AdapterInitError):
        create_provider("openai", bogus=True)


def test_constructor_kwargs_forwarded():
    adapter = create_provider("openai", api_key="sk-live-1", model="gpt-4o-mini", config={})
    assert adapter.default_model() == "gpt-4o-mini"  # nosec B101 - pytest assertion in tests
    assert adapter.has_default_credential is True  # nosec B101 - pytest assertion in tests
