"""Canonical DTOs for screenshot comparison results.

``AnalysisResult`` is what every analyze call returns: parsed from a model
reply, synthesized by the normalizer fallback, or built by the orchestrator
when a call degrades. All three paths go through the same validators so the
invariants below hold regardless of origin.

Invariants
----------
- ``differences`` and ``suggestions`` are always lists.
- ``confidence`` is always within ``[0, 1]``.
- Every difference and suggestion carries an ``id``; missing ids are
  assigned sequentially (``"1"``, ``"2"``, ...).
- Enum-like fields outside the vocabulary are coerced to a neutral member.
"""
from __future__ import annotations

import math
from typing import Any, List, Literal, Optional

from pydantic import Field, field_validator, model_validator

from ..constants import FALLBACK_CONFIDENCE
from .coercion import coerce_choice, coerce_confidence, coerce_list, coerce_text
from .wire_model import WireModel

DifferenceType = Literal["color", "spacing", "typography", "layout", "component", "analysis", "error"]
SuggestionType = Literal["css", "component", "layout", "styling", "general", "manual"]
Level = Literal["high", "medium", "low"]
Effort = Literal["quick", "moderate", "complex", "manual"]

DIFFERENCE_TYPES = ("color", "spacing", "typography", "layout", "component", "analysis", "error")
SUGGESTION_TYPES = ("css", "component", "layout", "styling", "general", "manual")
LEVELS = ("high", "medium", "low")
EFFORTS = ("quick", "moderate", "complex", "manual")


class Coordinates(WireModel):
    """Bounding box of a difference in screenshot pixel space."""

    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    @field_validator("x", "y", "width", "height", mode="before")
    @classmethod
    def _number(cls, v: Any) -> Any:
        """Accept numbers and numeric strings with a ``px`` suffix; anything else is 0."""
        if isinstance(v, bool):
            return 0
        if isinstance(v, str):
            v = v.strip().lower()
            if v.endswith("px"):
                v = v[:-2].strip()
        elif not isinstance(v, (int, float)):
            return 0
        try:
            num = float(v)
        except (ValueError, OverflowError):
            return 0
        return num if math.isfinite(num) else 0


class Difference(WireModel):
    """A single visual mismatch between the current and target screenshots."""

    id: Optional[str] = None
    type: DifferenceType = "analysis"
    severity: Level = "medium"
    description: str = ""
    current_value: str = ""
    target_value: str = ""
    coordinates: Optional[Coordinates] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v: Any) -> Any:
        return None if v is None or v == "" else coerce_text(v)

    @field_validator("type", mode="before")
    @classmethod
    def _type(cls, v: Any) -> str:
        return coerce_choice(v, DIFFERENCE_TYPES, "analysis")

    @field_validator("severity", mode="before")
    @classmethod
    def _severity(cls, v: Any) -> str:
        return coerce_choice(v, LEVELS, "medium")

    @field_validator("description", "current_value", "target_value", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return coerce_text(v)

    @field_validator("coordinates", mode="before")
    @classmethod
    def _coordinates(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, Coordinates)) else None


class Suggestion(WireModel):
    """A proposed code change that moves the UI toward the target."""

    id: Optional[str] = None
    type: SuggestionType = "general"
    description: str = ""
    code: str = ""
    framework: str = ""
    priority: Level = "medium"
    estimated_effort: Effort = "moderate"

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v: Any) -> Any:
        return None if v is None or v == "" else coerce_text(v)

    @field_validator("type", mode="before")
    @classmethod
    def _type(cls, v: Any) -> str:
        return coerce_choice(v, SUGGESTION_TYPES, "general")

    @field_validator("priority", mode="before")
    @classmethod
    def _priority(cls, v: Any) -> str:
        return coerce_choice(v, LEVELS, "medium")

    @field_validator("estimated_effort", mode="before")
    @classmethod
    def _effort(cls, v: Any) -> str:
        return coerce_choice(v, EFFORTS, "moderate")

    @field_validator("description", "code", "framework", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return coerce_text(v)


class AnalysisResult(WireModel):
    """Normalized outcome of comparing two screenshots."""

    differences: List[Difference] = Field(default_factory=list)
    suggestions: List[Suggestion] = Field(default_factory=list)
    confidence: float = FALLBACK_CONFIDENCE
    raw_analysis: Optional[str] = None
    provider: Optional[str] = None
    model: Optional[str] = None
    processed_at: Optional[str] = None

    @field_validator("differences", "suggestions", mode="before")
    @classmethod
    def _lists(cls, v: Any) -> List[Any]:
        return coerce_list(v)

    @field_validator("confidence", mode="before")
    @classmethod
    def _confidence(cls, v: Any) -> float:
        return coerce_confidence(v, FALLBACK_CONFIDENCE)

    @model_validator(mode="after")
    def _assign_ids(self) -> "AnalysisResult":
        for i, diff in enumerate(self.differences, start=1):
            if diff.id is None:
                diff.id = str(i)
        for i, sug in enumerate(self.suggestions, start=1):
            if sug.id is None:
                sug.id = str(i)
        return self


__all__ = [
    "Coordinates",
    "Difference",
    "Suggestion",
    "AnalysisResult",
    "DifferenceType",
    "SuggestionType",
    "DIFFERENCE_TYPES",
    "SUGGESTION_TYPES",
]
