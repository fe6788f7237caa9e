"""Canonical DTOs for code generation results."""
from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import Field, field_validator

from ..constants import FALLBACK_CONFIDENCE
from .coercion import coerce_choice, coerce_confidence, coerce_list, coerce_text
from .wire_model import WireModel

CodeSuggestionType = Literal["component", "style", "config", "manual"]
CODE_SUGGESTION_TYPES = ("component", "style", "config", "manual")


class CodeSuggestion(WireModel):
    """A generated file (or file fragment) and what it is for."""

    file: str = ""
    code: str = ""
    description: str = ""
    type: CodeSuggestionType = "component"

    @field_validator("file", "code", "description", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return coerce_text(v)

    @field_validator("type", mode="before")
    @classmethod
    def _type(cls, v: Any) -> str:
        return coerce_choice(v, CODE_SUGGESTION_TYPES, "component")


class CodeGenResult(WireModel):
    """Normalized outcome of a code generation request."""

    framework: str = ""
    suggestions: List[CodeSuggestion] = Field(default_factory=list)
    dependencies: List[str] = Field(default_factory=list)
    notes: str = ""
    confidence: float = FALLBACK_CONFIDENCE
    raw_analysis: Optional[str] = None
    provider: Optional[str] = None
    model: Optional[str] = None
    processed_at: Optional[str] = None

    @field_validator("framework", "notes", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return coerce_text(v)

    @field_validator("suggestions", mode="before")
    @classmethod
    def _suggestions(cls, v: Any) -> List[Any]:
        return [s for s in coerce_list(v) if isinstance(s, (dict, CodeSuggestion))]

    @field_validator("dependencies", mode="before")
    @classmethod
    def _dependencies(cls, v: Any) -> List[str]:
        return [coerce_text(d) for d in coerce_list(v) if d is not None and d != ""]

    @field_validator("confidence", mode="before")
    @classmethod
    def _confidence(cls, v: Any) -> float:
        return coerce_confidence(v, FALLBACK_CONFIDENCE)


__all__ = ["CodeSuggestion", "CodeGenResult", "CodeSuggestionType", "CODE_SUGGESTION_TYPES"]
