"""
AnalysisRequest: the immutable input of one screenshot comparison.

Built either directly from the two images or via ``from_images`` at the
boundary, where a list of uploads is checked for arity first.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ..errors import InputArityError
from .provider_name import ProviderName

REQUIRED_IMAGES = 2


@dataclass(frozen=True)
class AnalysisRequest:
    """Current and target screenshot plus per-call routing options.

    Attributes:
        current: Raw bytes of the screenshot as the UI looks now.
        target: Raw bytes of the design the UI should match.
        provider: Provider to dispatch to; strings are parsed (aliases allowed).
        framework: Optional framework hint forwarded into the prompt.
        model: Optional model override; the adapter default applies otherwise.
        api_key: Optional call-scoped credential override.
        project_id: Opaque caller metadata; never sent to a provider.
    """

    current: bytes
    target: bytes
    provider: ProviderName = ProviderName.OPENAI
    framework: Optional[str] = None
    model: Optional[str] = None
    api_key: Optional[str] = None
    project_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "provider", ProviderName.parse(self.provider))

    @classmethod
    def from_images(
        cls,
        images: Sequence[bytes],
        *,
        provider: Union[str, ProviderName] = ProviderName.OPENAI,
        framework: Optional[str] = None,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> "AnalysisRequest":
        """Build a request from an upload list; the first two images are used.

        Raises:
            InputArityError: when fewer than two images are supplied.
        """
        if len(images) < REQUIRED_IMAGES:
            raise InputArityError(
                "Two images are required: the current UI screenshot and the target design",
                expected=REQUIRED_IMAGES,
                received=len(images),
            )
        return cls(
            current=images[0],
            target=images[1],
            provider=provider,
            framework=framework,
            model=model,
            api_key=api_key,
            project_id=project_id,
        )

    def __repr__(self) -> str:
        return (
            f"AnalysisRequest(provider={self.provider.value!r}, framework={self.framework!r}, "
            f"model={self.model!r}, current={len(self.current)}B, target={len(self.target)}B, "
            f"api_key={'set' if self.api_key else None})"
        )


__all__ = ["AnalysisRequest", "REQUIRED_IMAGES"]
