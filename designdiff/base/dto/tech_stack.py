"""Canonical DTOs for tech-stack detection results."""
from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import Field, field_validator

from ..constants import FALLBACK_CONFIDENCE
from .coercion import coerce_choice, coerce_confidence, coerce_list, coerce_text
from .wire_model import WireModel

Platform = Literal["web", "mobile", "desktop"]
PLATFORMS = ("web", "mobile", "desktop")


class DetectedFile(WireModel):
    """One input file and the role the model (or extension map) assigned it."""

    filename: str = ""
    type: str = "unknown"
    confidence: float = FALLBACK_CONFIDENCE

    @field_validator("filename", "type", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return coerce_text(v) or "unknown"

    @field_validator("confidence", mode="before")
    @classmethod
    def _confidence(cls, v: Any) -> float:
        return coerce_confidence(v, FALLBACK_CONFIDENCE)


class TechStackResult(WireModel):
    """Framework, language and platform inferred from a set of source files."""

    framework: str = "unknown"
    language: str = "unknown"
    platform: Platform = "web"
    confidence: float = FALLBACK_CONFIDENCE
    auto_detected: bool = True
    detected_files: List[DetectedFile] = Field(default_factory=list)
    reasoning: Optional[str] = None
    raw_analysis: Optional[str] = None
    provider: Optional[str] = None
    model: Optional[str] = None
    processed_at: Optional[str] = None

    @field_validator("framework", "language", mode="before")
    @classmethod
    def _name(cls, v: Any) -> str:
        return coerce_text(v).strip() or "unknown"

    @field_validator("platform", mode="before")
    @classmethod
    def _platform(cls, v: Any) -> str:
        return coerce_choice(v, PLATFORMS, "web")

    @field_validator("confidence", mode="before")
    @classmethod
    def _confidence(cls, v: Any) -> float:
        return coerce_confidence(v, FALLBACK_CONFIDENCE)

    @field_validator("auto_detected", mode="before")
    @classmethod
    def _auto(cls, v: Any) -> bool:
        return True if v is None else bool(v)

    @field_validator("detected_files", mode="before")
    @classmethod
    def _files(cls, v: Any) -> List[Any]:
        return [f for f in coerce_list(v) if isinstance(f, (dict, DetectedFile))]

    @field_validator("reasoning", mode="before")
    @classmethod
    def _reasoning(cls, v: Any) -> Any:
        return None if v is None else coerce_text(v)


__all__ = ["DetectedFile", "TechStackResult", "Platform", "PLATFORMS"]
