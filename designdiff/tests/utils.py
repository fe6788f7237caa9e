"""Shared fakes for orchestrator and service tests."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from designdiff.base.models import CodeFile, CodeGenOptions

# 10x10 images are not decoded anywhere; only the signatures matter.
JPEG_10x10 = b"\xff\xd8\xff\xe0" + b"\x00" * 96
PNG_10x10 = b"\x89PNG\r\n\x1a\n" + b"\x00" * 92


class StubAdapter:
    """VisionProvider stand-in returning canned replies or raising ``error``.

    Records every call as ``(capability, kwargs)`` in ``calls``.
    """

    def __init__(
        self,
        reply: str = "",
        *,
        error: Optional[Exception] = None,
        name: str = "openai",
        model: str = "stub-model",
    ) -> None:
        self.reply = reply
        self.error = error
        self.name = name
        self.model = model
        self.calls: List[tuple] = []

    @property
    def provider_name(self) -> str:
        return self.name

    def model_for(self, capability: str, override: Optional[str] = None) -> str:
        return override or self.model

    def _answer(self, capability: str, **kwargs: Any) -> str:
        self.calls.append((capability, kwargs))
        if self.error is not None:
            raise self.error
        return self.reply

    def analyze_images(self, current: bytes, target: bytes, **kwargs: Any) -> str:
        return self._answer("analyze", current=current, target=target, **kwargs)

    def detect_tech_stack(self, code_files: Sequence[CodeFile], **kwargs: Any) -> str:
        return self._answer("tech_stack", code_files=list(code_files), **kwargs)

    def generate_code(self, options: CodeGenOptions, **kwargs: Any) -> str:
        return self._answer("codegen", options=options, **kwargs)

    def probe(self, model: Optional[str] = None, **kwargs: Any) -> None:
        self._answer("probe", model=model, **kwargs)


class RecordingFactory:
    """Factory double that counts ``create`` calls."""

    def __init__(self, adapter: Any) -> None:
        self.adapter = adapter
        self.created: List[Any] = []

    def create(self, provider: Any, **kwargs: Any) -> Any:
        self.created.append(provider)
        return self.adapter
