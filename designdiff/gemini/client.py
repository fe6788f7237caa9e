"""GeminiProvider adapter.

Uses the ``google-genai`` SDK (``genai.Client(...).models.generate_content``).
Each client carries its own API key, so a per-call key never leaks into the
default client. Screenshots are attached as inline-bytes parts.

Model selection: screenshot comparison uses the vision default
(``gemini-1.5-pro``); tech-stack detection and code generation use the
faster text model (``gemini-2.0-flash``) unless a model is given.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

try:
    from google import genai  # type: ignore
    from google.genai import types  # type: ignore
except Exception:  # pragma: no cover
    genai = None  # type: ignore
    types = None  # type: ignore

from ..base.constants import DEFAULT_TEMPERATURE
from ..base.utils.images import sniff_image_mime
from ..base.vision_parts import BaseVisionProvider
from ..config.defaults import GEMINI_DEFAULT_MODEL, GEMINI_DEFAULT_TEXT_MODEL


def build_contents(prompt: str, images: Sequence[bytes]) -> List[Any]:
    """Prompt text followed by one inline image part per screenshot."""
    contents: List[Any] = [prompt]
    for img in images:
        contents.append(types.Part.from_bytes(data=img, mime_type=sniff_image_mime(img)))
    return contents


def extract_text(resp: Any) -> str:
    """Return ``resp.text``; blocked or empty candidates yield ``""``."""
    return getattr(resp, "text", None) or ""


class GeminiProvider(BaseVisionProvider):
    """Adapter for Google Gemini models."""

    name = "gemini"
    default_model_name = GEMINI_DEFAULT_MODEL
    default_text_model_name = GEMINI_DEFAULT_TEXT_MODEL

    def _build_client(self, api_key: str) -> Any:
        if genai is None:
            raise self._sdk_unavailable("google-genai")
        http: Dict[str, Any] = {}
        if self._base_url:
            http["base_url"] = self._base_url
        if self._timeout:
            http["timeout"] = int(self._timeout * 1000)
        if http:
            return genai.Client(api_key=api_key, http_options=types.HttpOptions(**http))
        return genai.Client(api_key=api_key)

    def _complete(
        self,
        client: Any,
        *,
        model: str,
        prompt: str,
        images: Sequence[bytes],
        max_tokens: int,
    ) -> str:
        resp = client.models.generate_content(
            model=model,
            contents=build_contents(prompt, images),
            config=types.GenerateContentConfig(
                temperature=DEFAULT_TEMPERATURE,
                max_output_tokens=max_tokens,
            ),
        )
        return extract_text(resp)


__all__ = ["GeminiProvider", "build_contents", "extract_text"]
