"""VisionProvider Protocol (single-class module).

Defines the capability contract every provider adapter implements.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from ..models import CodeFile, CodeGenOptions


@runtime_checkable
class VisionProvider(Protocol):
    """Uniform surface over heterogeneous model vendors.

    Every capability returns the model's raw reply text; turning that text
    into a canonical result is the normalizer's job. Implementations raise
    ``CredentialMissingError`` before any network call when no key is usable
    and wrap every SDK failure in ``UpstreamCallFailedError``. They never
    fabricate results.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"openai"`` or ``"gemini"``."""
        ...

    def model_for(self, capability: str, override: Optional[str] = None) -> str:
        """Return the model a capability call would use."""
        ...

    def analyze_images(
        self,
        current: bytes,
        target: bytes,
        *,
        framework: Optional[str] = None,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
    ) -> str:
        ...

    def detect_tech_stack(
        self,
        code_files: Sequence[CodeFile],
        *,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
    ) -> str:
        ...

    def generate_code(
        self,
        options: CodeGenOptions,
        *,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
    ) -> str:
        ...

    def probe(self, model: Optional[str] = None, *, api_key: Optional[str] = None) -> None:
        """Issue a minimal request; raises exactly like the other capabilities."""
        ...
