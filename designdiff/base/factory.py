"""Provider Factory utilities.

Purpose
-------
Resolve a provider name to a concrete ``VisionProvider`` adapter. Dispatch
is closed over the :class:`ProviderName` enum: adding a vendor means adding
one enum member and one ``_PROVIDERS`` entry, never touching call sites.
Adapters are imported lazily using ``importlib`` so an uninstalled SDK only
matters for the provider that needs it.

Failure modes
-------------
- Unknown names raise :class:`UnsupportedProviderError` (a boundary error).
- Import or constructor failures raise :class:`AdapterInitError`; these
  indicate a broken installation rather than a bad request.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Tuple, Type, Union

from .models import ProviderName


class AdapterInitError(RuntimeError):
    """Raised when a known provider's adapter cannot be imported or built."""


class ProviderFactory:
    """Create provider adapters based on a provider name (e.g. ``"openai"``)."""

    # Map provider variants to import paths and class names
    _PROVIDERS: Dict[ProviderName, Dict[str, str]] = {
        ProviderName.OPENAI: {"module": "designdiff.openai.client", "class": "OpenAIProvider"},
        ProviderName.ANTHROPIC: {"module": "designdiff.anthropic.client", "class": "AnthropicProvider"},
        ProviderName.GEMINI: {"module": "designdiff.gemini.client", "class": "GeminiProvider"},
    }

    @classmethod
    def resolve_name(cls, provider: Union[str, ProviderName, None]) -> ProviderName:
        """Parse ``provider`` (aliases allowed) or raise ``UnsupportedProviderError``."""
        return ProviderName.parse(provider)

    @classmethod
    def create(cls, provider: Union[str, ProviderName], **kwargs: Any) -> Any:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Provider name or ``ProviderName`` member.
        **kwargs:
            Adapter constructor kwargs (``api_key``, ``model``, ``config``,
            ``client``).

        Returns
        -------
        Any
            Instance implementing ``VisionProvider``.

        Raises
        ------
        UnsupportedProviderError
            If ``provider`` names no supported variant.
        AdapterInitError
            If the adapter module fails to import, the class is missing, or
            the constructor raises.
        """
        name = cls.resolve_name(provider)
        spec = cls._PROVIDERS[name]
        module_path, class_name = spec["module"], spec["class"]

        try:
            mod = import_module(module_path)
        except ImportError as exc:  # pragma: no cover - import failure path
            raise AdapterInitError(
                f"Failed to import module '{module_path}' for provider '{name.value}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:  # pragma: no cover - packaging error
            raise AdapterInitError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{name.value}'"
            ) from exc

        try:
            return klass(**kwargs)
        except TypeError as exc:
            raise AdapterInitError(
                f"Invalid arguments for '{name.value}' adapter constructor: {exc}"
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported provider names in deterministic order."""
        return tuple(p.value for p in cls._PROVIDERS)


def create_provider(provider: Union[str, ProviderName], **kwargs: Any) -> Any:
    """Shorthand for :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


__all__ = ["ProviderFactory", "AdapterInitError", "create_provider"]
