"""Model catalog loader for the bundled provider YAML files.

Reads ``designdiff/catalog/providers/*.yaml`` and materializes them into
:class:`ModelInfo` entries grouped by provider.

YAML Schema (per-provider)
--------------------------

.. code-block:: yaml

    provider: gemini
    display_name: Google Gemini
    aliases:
      - google
    models:
      - id: gemini-1.5-pro
        name: Gemini 1.5 Pro
        description: Most capable model with 2M context window
        capabilities: [text, vision, code, audio]
        context_length: 2000000
        recommended: true

Only ``provider`` (or the file stem) and ``models`` are required.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..base.models import ModelInfo


def _default_catalog_root() -> Path:
    """Return ``designdiff/catalog/providers`` relative to this module."""
    return Path(__file__).resolve().parents[1] / "catalog" / "providers"


def _coerce_context_length(val: Any) -> Optional[int]:
    if val is None:
        return None
    try:
        return int(val)
    except (TypeError, ValueError):
        return None


def _coerce_capabilities(raw: Any) -> List[str]:
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        return [str(c) for c in raw]
    return [str(raw)]


def _load_yaml_document(path: Path) -> Dict[str, Any]:
    """Load a single catalog document.

    Raises
    ------
    ValueError
        If the root of the YAML document is not a mapping.
    """
    data: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Catalog file {path} must contain a mapping at top level.")
    return data


def _model_from_entry(provider: str, entry: Dict[str, Any]) -> ModelInfo:
    mid = str(entry.get("id") or entry.get("name") or "unknown")
    return ModelInfo(
        id=mid,
        name=str(entry.get("name") or mid),
        provider=provider,
        description=str(entry.get("description") or ""),
        capabilities=_coerce_capabilities(entry.get("capabilities")),
        context_length=_coerce_context_length(entry.get("context_length")),
        recommended=bool(entry.get("recommended", False)),
        experimental=bool(entry.get("experimental", False)),
    )


def discover_catalog_files(root: Optional[Path] = None) -> List[Path]:
    """Return the sorted ``*.yaml`` files under the catalog root (empty if missing)."""
    base = root or _default_catalog_root()
    if not base.exists():
        return []
    return sorted(p for p in base.glob("*.yaml") if p.is_file())


def load_model_catalog(catalog_root: Optional[Path] = None) -> Dict[str, Dict[str, Any]]:
    """Load every provider catalog.

    Returns
    -------
    Dict[str, Dict[str, Any]]
        ``{provider: {"name": display_name, "models": [ModelInfo, ...]}}``
        keyed by the lower-cased provider identifier.
    """
    catalog: Dict[str, Dict[str, Any]] = {}
    for path in discover_catalog_files(catalog_root):
        doc = _load_yaml_document(path)
        provider = str(doc.get("provider") or path.stem).lower().strip()
        entries = doc.get("models") or []
        models = [_model_from_entry(provider, e) for e in entries if isinstance(e, dict)]
        catalog[provider] = {
            "name": str(doc.get("display_name") or provider),
            "models": models,
        }
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> Dict[str, Dict[str, Any]]:
    """Bundled catalog, parsed once per process."""
    return load_model_catalog()


__all__ = ["discover_catalog_files", "load_model_catalog", "default_catalog"]
