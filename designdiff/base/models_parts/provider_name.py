"""Closed enumeration of supported providers."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Union

from ..errors import UnsupportedProviderError


class ProviderName(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"

    @classmethod
    def parse(cls, value: Union[str, "ProviderName", None]) -> "ProviderName":
        """Resolve a user-supplied name (case-insensitive, aliases allowed).

        Raises:
            UnsupportedProviderError: when ``value`` names no supported provider.
        """
        if isinstance(value, ProviderName):
            return value
        key = (value or "").strip().lower()
        key = PROVIDER_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedProviderError(str(value)) from None


# Alternate spellings accepted at the boundary
PROVIDER_ALIASES: Dict[str, str] = {
    "google": "gemini",
    "claude": "anthropic",
}


__all__ = ["ProviderName", "PROVIDER_ALIASES"]
