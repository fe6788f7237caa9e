"""AnthropicProvider adapter.

Uses the ``anthropic`` Messages API (``client.messages.create``). Screenshots
are sent as ``image`` content blocks with a base64 ``source`` whose
``media_type`` is sniffed from the image bytes. The reply text is the
newline-joined concatenation of all ``text`` blocks.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

try:
    import anthropic  # type: ignore
except Exception:  # pragma: no cover
    anthropic = None  # type: ignore

from ..base.constants import DEFAULT_TEMPERATURE
from ..base.utils.images import encode_image
from ..base.vision_parts import BaseVisionProvider
from ..config.defaults import ANTHROPIC_DEFAULT_MODEL


def build_content(prompt: str, images: Sequence[bytes]) -> List[Dict[str, Any]]:
    """Text block first, then one base64 image block per screenshot."""
    content: List[Dict[str, Any]] = [{"type": "text", "text": prompt}]
    for img in images:
        mime, b64 = encode_image(img)
        content.append(
            {
                "type": "image",
                "source": {"type": "base64", "media_type": mime, "data": b64},
            }
        )
    return content


def extract_text(resp: Any) -> str:
    """Extract newline-joined text content from an Anthropic response object.

    Non-text blocks are skipped; a response without text yields ``""``.
    """
    parts = [
        getattr(block, "text", None) or ""
        for block in (getattr(resp, "content", None) or [])
        if getattr(block, "type", None) == "text"
    ]
    return "\n".join(p for p in parts if p)


class AnthropicProvider(BaseVisionProvider):
    """Adapter for Claude models (default ``claude-3-5-sonnet-20241022``)."""

    name = "anthropic"
    default_model_name = ANTHROPIC_DEFAULT_MODEL

    def _build_client(self, api_key: str) -> Any:
        if anthropic is None:
            raise self._sdk_unavailable("anthropic")
        kwargs: Dict[str, Any] = {"api_key": api_key}
        if self._base_url:
            kwargs["base_url"] = self._base_url
        if self._timeout:
            kwargs["timeout"] = self._timeout
        return anthropic.Anthropic(**kwargs)

    def _complete(
        self,
        client: Any,
        *,
        model: str,
        prompt: str,
        images: Sequence[bytes],
        max_tokens: int,
    ) -> str:
        resp = client.messages.create(
            model=model,
            max_tokens=max_tokens,
            temperature=DEFAULT_TEMPERATURE,
            messages=[{"role": "user", "content": build_content(prompt, images)}],
        )
        return extract_text(resp)


__all__ = ["AnthropicProvider", "build_content", "extract_text"]
