"""CodeFile: one source file submitted for tech-stack detection."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class CodeFile:
    filename: str
    content: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CodeFile":
        """Accept ``{"filename", "content"}`` (or ``name``) mappings from JSON callers."""
        name = data.get("filename") or data.get("name") or ""
        return cls(filename=str(name), content=str(data.get("content") or ""))


__all__ = ["CodeFile"]
