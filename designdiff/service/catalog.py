"""Model catalog queries and availability probes.

``list_models`` serves the bundled YAML catalog. ``test_model_availability``
issues a one-token request through the provider adapter and reports the
outcome instead of raising, matching the orchestrator's degrade policy.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from ..base.errors import CredentialMissingError, ProviderError
from ..base.factory import AdapterInitError
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ProviderName
from .model_catalog_loader import default_catalog
from .orchestrator import AnalysisOrchestrator, get_orchestrator

_logger = get_logger("designdiff.catalog")


def _provider_entry(name: str) -> Dict[str, Any]:
    section = default_catalog().get(name) or {"name": name, "models": []}
    return {"name": section["name"], "models": [m.to_dict() for m in section["models"]]}


def list_models(provider: Optional[str] = None) -> Dict[str, Any]:
    """Return the catalog for one provider, or all providers keyed by name.

    Raises:
        UnsupportedProviderError: ``provider`` is given but not supported.
    """
    if provider:
        return _provider_entry(ProviderName.parse(provider).value)
    return {p.value: _provider_entry(p.value) for p in ProviderName}


def test_model_availability(
    provider: str,
    model: str,
    api_key: Optional[str] = None,
    *,
    orchestrator: Optional[AnalysisOrchestrator] = None,
) -> Dict[str, Any]:
    """Probe ``model`` with a minimal request.

    Returns ``{"available": bool, "tested": bool, "error"?: str}``.
    ``tested`` is false when no request was sent (for example, no credential).

    Raises:
        UnsupportedProviderError: unknown ``provider``.
    """
    name = ProviderName.parse(provider)
    orch = orchestrator or get_orchestrator()
    try:
        orch.adapter(name).probe(model, api_key=api_key)
    except CredentialMissingError as err:
        return {"available": False, "tested": False, "error": err.message}
    except (ProviderError, AdapterInitError) as err:
        normalized_log_event(
            _logger,
            "catalog.probe",
            LogContext(provider=name.value, model=model),
            phase="degraded",
            error_code=getattr(getattr(err, "code", None), "value", None),
        )
        return {"available": False, "tested": True, "error": getattr(err, "message", str(err))}
    return {"available": True, "tested": True}


# Not a pytest test despite the name
test_model_availability.__test__ = False  # type: ignore[attr-defined]


__all__ = ["list_models", "test_model_availability"]
