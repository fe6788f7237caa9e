"""Image helpers shared by the vision adapters.

Screenshots arrive as raw bytes with no declared type, so the MIME type is
sniffed from the leading magic bytes. Only the four formats every supported
vendor accepts are recognized; anything else is labelled ``image/jpeg``.
"""
from __future__ import annotations

import base64
from typing import Tuple

from ..constants import DEFAULT_IMAGE_MIME

SUPPORTED_IMAGE_MIME_TYPES = ("image/jpeg", "image/png", "image/webp", "image/gif")


def sniff_image_mime(data: bytes) -> str:
    """Return the MIME type implied by ``data``'s signature."""
    if data.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if data.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if data[:6] in (b"GIF87a", b"GIF89a"):
        return "image/gif"
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return DEFAULT_IMAGE_MIME


def encode_image(data: bytes) -> Tuple[str, str]:
    """Return ``(mime_type, base64_text)`` for inline transmission."""
    return sniff_image_mime(data), base64.b64encode(data).decode("ascii")


def to_data_url(data: bytes) -> str:
    """Encode ``data`` as a ``data:`` URL (OpenAI ``image_url`` parts)."""
    mime, b64 = encode_image(data)
    return f"data:{mime};base64,{b64}"


__all__ = ["SUPPORTED_IMAGE_MIME_TYPES", "sniff_image_mime", "encode_image", "to_data_url"]
