"""Canonical result schema shared by adapters, normalizer and orchestrator."""

from .wire_model import WireModel
from .analysis import (
    DIFFERENCE_TYPES,
    SUGGESTION_TYPES,
    AnalysisResult,
    Coordinates,
    Difference,
    Suggestion,
)
from .tech_stack import PLATFORMS, DetectedFile, TechStackResult
from .codegen import CODE_SUGGESTION_TYPES, CodeGenResult, CodeSuggestion

__all__ = [
    "WireModel",
    "Coordinates",
    "Difference",
    "Suggestion",
    "AnalysisResult",
    "DetectedFile",
    "TechStackResult",
    "CodeSuggestion",
    "CodeGenResult",
    "DIFFERENCE_TYPES",
    "SUGGESTION_TYPES",
    "PLATFORMS",
    "CODE_SUGGESTION_TYPES",
]
