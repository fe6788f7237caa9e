"""
ModelInfo DTO for catalog listings.

Represents a single model entry from the bundled provider catalogs. The
``to_dict`` form uses the camelCase keys the HTTP surface exposes.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ModelInfo:
    """A single model listing entry.

    Attributes:
        id: Model identifier sent to the vendor API.
        name: Human-friendly display name.
        provider: Provider key owning this model.
        description: One-line summary for pickers.
        capabilities: Capability tags (``text``, ``vision``, ``code``...).
        context_length: Optional maximum context window size.
        recommended: Whether pickers should preselect this model.
        experimental: Whether the model is a preview release.
    """

    id: str
    name: str
    provider: str
    description: str = ""
    capabilities: List[str] = field(default_factory=list)
    context_length: Optional[int] = None
    recommended: bool = False
    experimental: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready entry; ``experimental`` only when set."""
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "capabilities": list(self.capabilities),
            "contextLength": self.context_length,
            "recommended": self.recommended,
        }
        if self.experimental:
            data["experimental"] = True
        return data


__all__ = ["ModelInfo"]
