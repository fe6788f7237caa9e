"""Orchestrator: provider dispatch, normalization and failure degradation.

Error policy
------------
Only boundary errors propagate to callers:

* ``UnsupportedProviderError`` - the provider name is not a supported
  variant; raised before any adapter is built.
* ``InputArityError`` - fewer than two screenshots, or no code files;
  raised before dispatch.

Everything after dispatch degrades into an ordinary result with
``confidence == 0.0``: a missing credential, a failed vendor call, an empty
reply. Unparseable replies never reach this layer as errors; the normalizer
already turned them into fallback results.

Each successful or degraded result is annotated with ``provider``, the
effective ``model`` and ``processedAt`` (UTC, ISO-8601).
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union

from ..base.constants import FAILURE_CONFIDENCE
from ..base.dto import (
    AnalysisResult,
    CodeGenResult,
    CodeSuggestion,
    Difference,
    Suggestion,
    TechStackResult,
)
from ..base.errors import (
    CredentialMissingError,
    ErrorCode,
    InputArityError,
    ProviderError,
    UpstreamCallFailedError,
)
from ..base.factory import AdapterInitError, ProviderFactory
from ..base.interfaces import VisionProvider
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import AnalysisRequest, CodeFile, CodeGenOptions, ProviderName
from ..base.normalize import normalize_analysis, normalize_codegen, normalize_tech_stack
from ..base.vision_parts import ANALYZE, CODEGEN, TECH_STACK
from ..config.env import get_env_var_name

ProviderLike = Union[str, ProviderName]
CodeFileLike = Union[CodeFile, Mapping[str, Any]]

_logger = get_logger("designdiff.orchestrator")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _credential_hint(provider: ProviderName) -> str:
    env = get_env_var_name(provider.value)
    return f"Set {env} or pass an apiKey with the request." if env else "Pass an apiKey with the request."


def _failure_summary(provider: ProviderName, err: ProviderError) -> str:
    if isinstance(err, CredentialMissingError):
        return f"No API key configured for provider '{provider.value}'. {_credential_hint(provider)}"
    return f"AI analysis failed ({err.code.value}): {err.message}"


# ---------------------------------------------------------------- degraded results

def degraded_analysis(
    provider: ProviderName, err: ProviderError, framework: Optional[str] = None
) -> AnalysisResult:
    """One ``error`` difference and one ``manual`` suggestion, zero confidence."""
    missing = isinstance(err, CredentialMissingError)
    return AnalysisResult(
        differences=[
            Difference(
                type="error",
                severity="high",
                description=_failure_summary(provider, err),
                current_value="Analysis unavailable",
                target_value="Manual review required",
            )
        ],
        suggestions=[
            Suggestion(
                type="manual",
                description=(
                    f"Configure an API key for {provider.value} and run the analysis again"
                    if missing
                    else "Compare the screenshots manually or retry the analysis later"
                ),
                code="",
                framework=framework or "css",
                priority="high",
                estimated_effort="manual",
            )
        ],
        confidence=FAILURE_CONFIDENCE,
    )


def degraded_tech_stack(provider: ProviderName, err: ProviderError) -> TechStackResult:
    """Unknown stack at zero confidence, with the failure as reasoning."""
    return TechStackResult(
        framework="unknown",
        language="unknown",
        platform="web",
        confidence=FAILURE_CONFIDENCE,
        auto_detected=False,
        detected_files=[],
        reasoning=f"Tech stack detection did not run: {_failure_summary(provider, err)}",
    )


def degraded_codegen(provider: ProviderName, err: ProviderError, options: CodeGenOptions) -> CodeGenResult:
    """Single ``manual`` suggestion explaining why nothing was generated."""
    return CodeGenResult(
        framework=options.framework,
        suggestions=[
            CodeSuggestion(
                file="",
                code="",
                description=f"Implement manually: {options.description}",
                type="manual",
            )
        ],
        dependencies=[],
        notes=f"Code generation did not run: {_failure_summary(provider, err)}",
        confidence=FAILURE_CONFIDENCE,
    )


# ---------------------------------------------------------------- orchestrator

class AnalysisOrchestrator:
    """Dispatch capability calls to provider adapters and normalize replies.

    Parameters
    ----------
    adapters:
        Optional pre-built adapters keyed by provider; anything missing is
        created lazily through ``factory`` and cached.
    factory:
        Adapter factory exposing ``create(ProviderName)``.
    clock:
        Returns the timestamp stamped into ``processedAt``.
    """

    def __init__(
        self,
        adapters: Optional[Mapping[ProviderLike, VisionProvider]] = None,
        *,
        factory: Any = ProviderFactory,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._adapters: Dict[ProviderName, VisionProvider] = {
            ProviderName.parse(k): v for k, v in (adapters or {}).items()
        }
        self._factory = factory
        self._clock = clock

    def adapter(self, provider: ProviderLike) -> VisionProvider:
        """Return the (cached) adapter for ``provider``.

        Raises:
            UnsupportedProviderError: before the factory is consulted.
        """
        name = ProviderName.parse(provider)
        adapter = self._adapters.get(name)
        if adapter is None:
            adapter = self._factory.create(name)
            self._adapters[name] = adapter
        return adapter

    def _stamp(self, result: Any, provider: ProviderName, model: Optional[str]) -> Any:
        result.provider = provider.value
        result.model = model
        result.processed_at = self._clock().isoformat()
        return result

    def _dispatch(
        self,
        provider: ProviderName,
        capability: str,
        model: Optional[str],
        project_id: Optional[str],
        call: Callable[[VisionProvider], str],
    ) -> tuple:
        """Run ``call`` against the adapter; returns ``(text, model, error)``."""
        effective_model = model
        try:
            adapter = self.adapter(provider)
            effective_model = adapter.model_for(capability, model)
            return call(adapter), effective_model, None
        except ProviderError as err:
            failure = err
        except AdapterInitError as exc:
            failure = UpstreamCallFailedError(
                code=ErrorCode.UNAVAILABLE, message=str(exc), provider=provider.value, raw=exc
            )
        except Exception as exc:  # non-wrapping adapter
            failure = UpstreamCallFailedError(
                code=ErrorCode.INTERNAL,
                message=f"{type(exc).__name__}: {exc}",
                provider=provider.value,
                model=effective_model,
                raw=exc,
            )
        normalized_log_event(
            _logger,
            "orchestrator.degraded",
            LogContext(provider=provider.value, model=effective_model, capability=capability, project_id=project_id),
            phase="degraded",
            error_code=failure.code.value,
            error=failure.message,
        )
        return None, effective_model, failure

    # ---- capabilities ---------------------------------------------------------

    def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """Compare the request's screenshots and return a canonical result."""
        provider = request.provider
        text, model, failure = self._dispatch(
            provider,
            ANALYZE,
            request.model,
            request.project_id,
            lambda a: a.analyze_images(
                request.current,
                request.target,
                framework=request.framework,
                model=request.model,
                api_key=request.api_key,
            ),
        )
        if failure is not None:
            result = degraded_analysis(provider, failure, request.framework)
        else:
            result = normalize_analysis(text, request.framework)
        return self._stamp(result, provider, model)

    def analyze_images(
        self,
        current: bytes,
        target: bytes,
        *,
        provider: ProviderLike = ProviderName.OPENAI,
        framework: Optional[str] = None,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> AnalysisResult:
        """Convenience wrapper building an ``AnalysisRequest``.

        Raises:
            UnsupportedProviderError: unknown ``provider``.
            InputArityError: either screenshot is missing or empty.
        """
        name = ProviderName.parse(provider)
        images = [img for img in (current, target) if img]
        request = AnalysisRequest.from_images(
            images,
            provider=name,
            framework=framework,
            model=model,
            api_key=api_key,
            project_id=project_id,
        )
        return self.analyze(request)

    def detect_tech_stack(
        self,
        files: Sequence[CodeFileLike],
        *,
        provider: ProviderLike = ProviderName.OPENAI,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
    ) -> TechStackResult:
        """Infer framework, language and platform from ``files``.

        Raises:
            UnsupportedProviderError: unknown ``provider``.
            InputArityError: ``files`` is empty.
        """
        name = ProviderName.parse(provider)
        code_files = [f if isinstance(f, CodeFile) else CodeFile.from_mapping(f) for f in files]
        if not code_files:
            raise InputArityError("At least one code file is required", expected=1, received=0)
        text, eff_model, failure = self._dispatch(
            name,
            TECH_STACK,
            model,
            None,
            lambda a: a.detect_tech_stack(code_files, model=model, api_key=api_key),
        )
        if failure is not None:
            result = degraded_tech_stack(name, failure)
        else:
            result = normalize_tech_stack(text, code_files)
        return self._stamp(result, name, eff_model)

    def generate_code(
        self,
        options: CodeGenOptions,
        *,
        provider: ProviderLike = ProviderName.OPENAI,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
    ) -> CodeGenResult:
        """Generate code for ``options``.

        Raises:
            UnsupportedProviderError: unknown ``provider``.
        """
        name = ProviderName.parse(provider)
        text, eff_model, failure = self._dispatch(
            name,
            CODEGEN,
            model,
            None,
            lambda a: a.generate_code(options, model=model, api_key=api_key),
        )
        if failure is not None:
            result = degraded_codegen(name, failure, options)
        else:
            result = normalize_codegen(text, options)
        return self._stamp(result, name, eff_model)


_default_orchestrator: Optional[AnalysisOrchestrator] = None


def get_orchestrator() -> AnalysisOrchestrator:
    """Process-wide orchestrator used by the module-level helpers."""
    global _default_orchestrator
    if _default_orchestrator is None:
        _default_orchestrator = AnalysisOrchestrator()
    return _default_orchestrator


def analyze_images(
    current: bytes,
    target: bytes,
    *,
    provider: ProviderLike = ProviderName.OPENAI,
    framework: Optional[str] = None,
    model: Optional[str] = None,
    api_key: Optional[str] = None,
) -> AnalysisResult:
    return get_orchestrator().analyze_images(
        current, target, provider=provider, framework=framework, model=model, api_key=api_key
    )


def detect_tech_stack(
    files: Sequence[CodeFileLike],
    *,
    provider: ProviderLike = ProviderName.OPENAI,
    model: Optional[str] = None,
    api_key: Optional[str] = None,
) -> TechStackResult:
    return get_orchestrator().detect_tech_stack(files, provider=provider, model=model, api_key=api_key)


def generate_code(
    options: CodeGenOptions,
    *,
    provider: ProviderLike = ProviderName.OPENAI,
    model: Optional[str] = None,
    api_key: Optional[str] = None,
) -> CodeGenResult:
    return get_orchestrator().generate_code(options, provider=provider, model=model, api_key=api_key)


__all__ = [
    "AnalysisOrchestrator",
    "get_orchestrator",
    "analyze_images",
    "detect_tech_stack",
    "generate_code",
    "degraded_analysis",
    "degraded_tech_stack",
    "degraded_codegen",
]
