"""Pytest configuration for the designdiff test suite.

Every test runs against an isolated configuration: provider credential and
model variables are removed, the dotenv path points at a missing file, and
the cached config file / default orchestrator are reset. Tests that need a
credential set it explicitly.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from designdiff.config import reset_config_cache
from designdiff.tests.utils import JPEG_10x10

_ISOLATED_VARS = (
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "OPENAI_MODEL",
    "ANTHROPIC_MODEL",
    "GEMINI_MODEL",
    "OPENAI_BASE_URL",
    "ANTHROPIC_BASE_URL",
    "GEMINI_BASE_URL",
    "OPENAI_TIMEOUT",
    "ANTHROPIC_TIMEOUT",
    "GEMINI_TIMEOUT",
    "DESIGNDIFF_CONFIG_FILE",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Strip ambient credentials so tests never reach a real vendor."""
    for var in _ISOLATED_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "absent.env"))
    monkeypatch.setattr("designdiff.service.orchestrator._default_orchestrator", None)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def jpeg_pair() -> tuple:
    return JPEG_10x10, JPEG_10x10
