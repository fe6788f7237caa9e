"""Template base class for the vision provider adapters.

``BaseVisionProvider`` owns everything the three vendors share:

* default credential and model resolution through ``get_provider_config``
  (a missing key is logged, never raised, at construction time);
* the lazily built, cached default SDK client and call-scoped override
  clients that are discarded after the call;
* prompt construction and token budgets per capability;
* structured ``<capability>.start`` / ``.end`` / ``.error`` logging with
  latency;
* wrapping of SDK exceptions into ``UpstreamCallFailedError`` with a
  classified ``ErrorCode``.

Subclasses provide only ``_build_client`` (construct the SDK client) and
``_complete`` (send one prompt plus optional images, return reply text).

Concurrency: the default client is built at most once per adapter in the
common case; a race between two first calls can build it twice, and either
instance is equivalent, so no lock is taken.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional, Sequence

from ...config import get_provider_config
from ...config.env import is_placeholder
from ..constants import (
    ANALYZE_MAX_TOKENS,
    CODEGEN_MAX_TOKENS,
    PROBE_MAX_TOKENS,
    TECH_STACK_MAX_TOKENS,
)
from ..errors import (
    RETRYABLE_CODES,
    CredentialMissingError,
    ErrorCode,
    ProviderError,
    UpstreamCallFailedError,
    classify_exception,
)
from ..interfaces import HasDefaultModel, VisionProvider
from ..logging import LogContext, get_logger, log_event, normalized_log_event
from ..models import CodeFile, CodeGenOptions
from ..prompts import (
    PROBE_PROMPT,
    build_analysis_prompt,
    build_codegen_prompt,
    build_tech_stack_prompt,
)

ANALYZE = "analyze"
TECH_STACK = "tech_stack"
CODEGEN = "codegen"
PROBE = "probe"


def _usable_key(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    key = str(value).strip()
    if not key or is_placeholder(key):
        return None
    return key


class BaseVisionProvider(VisionProvider, HasDefaultModel):
    """Shared implementation of the ``VisionProvider`` capabilities.

    Parameters
    ----------
    api_key:
        Default credential. When omitted it is resolved from configuration
        (env var, config file, ``.env``).
    model:
        Default model for every capability. When omitted the configured
        model (or the provider default) is used.
    config:
        Pre-merged provider configuration; skips ``get_provider_config``.
    client:
        Pre-built default SDK client (tests inject fakes here). Counts as a
        usable credential.
    """

    name: str = ""
    default_model_name: str = ""
    default_text_model_name: Optional[str] = None

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        *,
        config: Optional[Dict[str, Any]] = None,
        client: Any = None,
    ) -> None:
        cfg = config if config is not None else get_provider_config(self.name)
        self._api_key = _usable_key(api_key) or _usable_key(cfg.get("api_key"))
        self._model = model or cfg.get("model") or self.default_model_name
        self._text_model = model or cfg.get("text_model") or self.default_text_model_name or self._model
        self._base_url = cfg.get("base_url")
        self._timeout = cfg.get("timeout_seconds")
        self._client = client
        self._logger = get_logger(f"designdiff.{self.name}")
        if self._api_key is None and client is None:
            log_event(
                self._logger,
                "provider.credential_missing",
                LogContext(provider=self.name, model=self._model),
                level=logging.WARNING,
                detail="no default API key configured; per-call keys still accepted",
            )

    # ---- identity -----------------------------------------------------------

    @property
    def provider_name(self) -> str:
        return self.name

    def default_model(self) -> Optional[str]:
        return self._model

    def model_for(self, capability: str, override: Optional[str] = None) -> str:
        """Vision work uses the default model; text-only work the text model."""
        if override:
            return override
        return self._model if capability == ANALYZE else self._text_model

    @property
    def has_default_credential(self) -> bool:
        return self._api_key is not None or self._client is not None

    # ---- vendor hooks ---------------------------------------------------------

    def _build_client(self, api_key: str) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError

    def _complete(
        self,
        client: Any,
        *,
        model: str,
        prompt: str,
        images: Sequence[bytes],
        max_tokens: int,
    ) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    def _sdk_unavailable(self, package: str) -> UpstreamCallFailedError:
        return UpstreamCallFailedError(
            code=ErrorCode.UNAVAILABLE,
            message=f"{package} SDK not installed",
            provider=self.name,
        )

    # ---- client resolution ---------------------------------------------------

    def _client_for(self, api_key: Optional[str]) -> Any:
        """Return a call-scoped client for ``api_key`` or the cached default.

        Raises:
            CredentialMissingError: when neither an override nor a default
                credential is available.
        """
        override = _usable_key(api_key)
        if override is not None:
            return self._build_client(override)
        if self._client is None:
            if self._api_key is None:
                raise CredentialMissingError(
                    message=f"No API key configured for provider '{self.name}'",
                    provider=self.name,
                )
            self._client = self._build_client(self._api_key)
        return self._client

    # ---- dispatch -----------------------------------------------------------

    def _invoke(
        self,
        capability: str,
        *,
        model: str,
        prompt: str,
        images: Sequence[bytes] = (),
        max_tokens: int,
        api_key: Optional[str] = None,
        allow_empty: bool = False,
    ) -> str:
        ctx = LogContext(provider=self.name, model=model, capability=capability)
        normalized_log_event(
            self._logger,
            f"{capability}.start",
            ctx,
            phase="start",
            images=len(images) or None,
            override_key=bool(_usable_key(api_key)) or None,
        )
        start = time.perf_counter()
        try:
            client = self._client_for(api_key)
            text = self._complete(
                client, model=model, prompt=prompt, images=images, max_tokens=max_tokens
            )
        except ProviderError as err:
            if err.model is None:
                err.model = model
            normalized_log_event(
                self._logger,
                f"{capability}.error",
                ctx,
                phase="error",
                error_code=err.code.value,
                latency_ms=(time.perf_counter() - start) * 1000.0,
                error=err.message,
            )
            raise
        except Exception as exc:
            code = classify_exception(exc)
            normalized_log_event(
                self._logger,
                f"{capability}.error",
                ctx,
                phase="error",
                error_code=code.value,
                latency_ms=(time.perf_counter() - start) * 1000.0,
                error=str(exc),
            )
            raise UpstreamCallFailedError(
                code=code,
                message=f"{self.name} {capability} failed: {exc}",
                provider=self.name,
                model=model,
                retryable=code in RETRYABLE_CODES,
                raw=exc,
            ) from exc

        latency_ms = (time.perf_counter() - start) * 1000.0
        if not allow_empty and not (text or "").strip():
            normalized_log_event(
                self._logger,
                f"{capability}.error",
                ctx,
                phase="error",
                error_code=ErrorCode.UNKNOWN.value,
                latency_ms=latency_ms,
                error="empty reply",
            )
            raise UpstreamCallFailedError(
                code=ErrorCode.UNKNOWN,
                message=f"No response from {self.name}",
                provider=self.name,
                model=model,
            )
        normalized_log_event(
            self._logger,
            f"{capability}.end",
            ctx,
            phase="end",
            latency_ms=latency_ms,
            reply_chars=len(text or ""),
        )
        return text or ""

    # ---- capabilities ---------------------------------------------------------

    def analyze_images(
        self,
        current: bytes,
        target: bytes,
        *,
        framework: Optional[str] = None,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
    ) -> str:
        """Compare two screenshots; returns the raw model reply."""
        return self._invoke(
            ANALYZE,
            model=self.model_for(ANALYZE, model),
            prompt=build_analysis_prompt(framework),
            images=(current, target),
            max_tokens=ANALYZE_MAX_TOKENS,
            api_key=api_key,
        )

    def detect_tech_stack(
        self,
        code_files: Sequence[CodeFile],
        *,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
    ) -> str:
        """Ask the model which stack ``code_files`` belong to; raw reply."""
        return self._invoke(
            TECH_STACK,
            model=self.model_for(TECH_STACK, model),
            prompt=build_tech_stack_prompt(code_files),
            max_tokens=TECH_STACK_MAX_TOKENS,
            api_key=api_key,
        )

    def generate_code(
        self,
        options: CodeGenOptions,
        *,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
    ) -> str:
        """Request generated code for ``options``; raw reply."""
        return self._invoke(
            CODEGEN,
            model=self.model_for(CODEGEN, model),
            prompt=build_codegen_prompt(options),
            max_tokens=CODEGEN_MAX_TOKENS,
            api_key=api_key,
        )

    def probe(self, model: Optional[str] = None, *, api_key: Optional[str] = None) -> None:
        """One-token round trip used to check that a model is reachable."""
        self._invoke(
            PROBE,
            model=self.model_for(PROBE, model),
            prompt=PROBE_PROMPT,
            max_tokens=PROBE_MAX_TOKENS,
            api_key=api_key,
            allow_empty=True,
        )


__all__ = ["BaseVisionProvider", "ANALYZE", "TECH_STACK", "CODEGEN", "PROBE"]
