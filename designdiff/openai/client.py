"""OpenAI provider adapter.

Uses the ``openai>=1`` Chat Completions API (``client.chat.completions.create``).
Screenshots are attached as ``image_url`` parts carrying base64 data URLs
with ``detail="high"``; text-only capabilities send a plain string message.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

try:
    from openai import OpenAI as _OpenAIClient  # type: ignore
except Exception:  # pragma: no cover - optional dependency
    _OpenAIClient = None  # type: ignore

from ..base.constants import DEFAULT_TEMPERATURE
from ..base.utils.images import to_data_url
from ..base.vision_parts import BaseVisionProvider
from ..config.defaults import OPENAI_DEFAULT_MODEL


def build_messages(prompt: str, images: Sequence[bytes]) -> List[Dict[str, Any]]:
    """Return the single user message for ``prompt`` plus inline images."""
    if not images:
        return [{"role": "user", "content": prompt}]
    content: List[Dict[str, Any]] = [{"type": "text", "text": prompt}]
    for img in images:
        content.append({"type": "image_url", "image_url": {"url": to_data_url(img), "detail": "high"}})
    return [{"role": "user", "content": content}]


def extract_text(resp: Any) -> str:
    """Return the first choice's message content, or ``""`` when absent."""
    choices = getattr(resp, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""


class OpenAIProvider(BaseVisionProvider):
    """Adapter for OpenAI vision-capable chat models (default ``gpt-4o``)."""

    name = "openai"
    default_model_name = OPENAI_DEFAULT_MODEL

    def _build_client(self, api_key: str) -> Any:
        if _OpenAIClient is None:
            raise self._sdk_unavailable("openai")
        kwargs: Dict[str, Any] = {"api_key": api_key}
        if self._base_url:
            kwargs["base_url"] = self._base_url
        if self._timeout:
            kwargs["timeout"] = self._timeout
        return _OpenAIClient(**kwargs)

    def _complete(
        self,
        client: Any,
        *,
        model: str,
        prompt: str,
        images: Sequence[bytes],
        max_tokens: int,
    ) -> str:
        resp = client.chat.completions.create(
            model=model,
            messages=build_messages(prompt, images),
            max_tokens=max_tokens,
            temperature=DEFAULT_TEMPERATURE,
        )
        return extract_text(resp)


__all__ = ["OpenAIProvider", "build_messages", "extract_text"]
