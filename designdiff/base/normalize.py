"""Response normalizer: free-form model text to canonical results.

Extraction is deliberately simple: the greedy pattern ``\\{[\\s\\S]*\\}``
captures everything from the first ``{`` to the last ``}`` and the capture
must parse as one JSON object. Prose that contains stray braces before or
after the payload therefore defeats extraction; such replies take the
fallback path rather than raising.

Every public ``normalize_*`` function returns a schema-valid result and
never raises. On failure the result is synthesized with
``FALLBACK_CONFIDENCE`` and carries the full reply in ``rawAnalysis``.
"""
from __future__ import annotations

import json
import re
from typing import Any, Dict, Optional, Sequence

from pydantic import ValidationError

from .constants import DESCRIPTION_ELLIPSIS, DESCRIPTION_PREVIEW_CHARS, FALLBACK_CONFIDENCE
from .dto import (
    AnalysisResult,
    CodeGenResult,
    CodeSuggestion,
    Coordinates,
    DetectedFile,
    Difference,
    Suggestion,
    TechStackResult,
)
from .errors import ParseFailureError
from .logging import get_logger, log_event
from .models import CodeFile, CodeGenOptions
from .utils.files import file_type

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

# Keys the orchestrator owns; values echoed by a model are discarded.
_ANNOTATION_KEYS = ("provider", "model", "processedAt", "processed_at")

_logger = get_logger("designdiff.normalize")


def extract_json_object(text: Optional[str]) -> Dict[str, Any]:
    """Return the JSON object embedded in ``text``.

    Raises:
        ParseFailureError: when no ``{...}`` span exists, the span is not
            valid JSON, or it decodes to something other than an object.
    """
    match = _JSON_OBJECT.search(text or "")
    if not match:
        raise ParseFailureError(message="no JSON object found in model reply", provider="normalizer")
    try:
        data = json.loads(match.group(0))
    except (ValueError, RecursionError) as exc:
        raise ParseFailureError(
            message=f"embedded JSON is malformed: {exc}", provider="normalizer", raw=exc
        ) from exc
    if not isinstance(data, dict):
        raise ParseFailureError(message="embedded JSON is not an object", provider="normalizer")
    return data


def preview(text: str) -> str:
    """First ``DESCRIPTION_PREVIEW_CHARS`` characters of ``text`` plus an ellipsis."""
    return (text or "")[:DESCRIPTION_PREVIEW_CHARS] + DESCRIPTION_ELLIPSIS


def _strip_annotations(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if k not in _ANNOTATION_KEYS}


def _log_fallback(kind: str, reason: Exception, text: str) -> None:
    log_event(
        _logger,
        "normalize.fallback",
        kind=kind,
        reason=str(reason),
        reply_chars=len(text or ""),
    )


# ---------------------------------------------------------------- analysis

def analysis_fallback(text: str, framework: Optional[str] = None) -> AnalysisResult:
    """Single-entry analysis wrapping an unstructured reply."""
    return AnalysisResult(
        differences=[
            Difference(
                type="analysis",
                severity="medium",
                description=preview(text),
                current_value="Current UI state",
                target_value="Target design state",
                coordinates=Coordinates(x=0, y=0, width=100, height=100),
            )
        ],
        suggestions=[
            Suggestion(
                type="general",
                description="Review the detailed analysis and apply suggested changes",
                code="/* See detailed analysis above */",
                framework=framework or "css",
                priority="medium",
                estimated_effort="moderate",
            )
        ],
        confidence=FALLBACK_CONFIDENCE,
        raw_analysis=text,
    )


def normalize_analysis(text: str, framework: Optional[str] = None) -> AnalysisResult:
    """Parse an analysis reply, falling back to a single summary entry."""
    try:
        return AnalysisResult.model_validate(_strip_annotations(extract_json_object(text)))
    except (ParseFailureError, ValidationError, RecursionError) as exc:
        _log_fallback("analysis", exc, text)
        return analysis_fallback(text, framework)


# -------------------------------------------------------------- tech stack

def tech_stack_fallback(text: str, code_files: Sequence[CodeFile] = ()) -> TechStackResult:
    """Unknown stack, with each input file described by its extension."""
    return TechStackResult(
        framework="unknown",
        language="unknown",
        platform="web",
        confidence=FALLBACK_CONFIDENCE,
        auto_detected=False,
        detected_files=[
            DetectedFile(filename=f.filename, type=file_type(f.filename), confidence=FALLBACK_CONFIDENCE)
            for f in code_files
        ],
        reasoning=preview(text),
        raw_analysis=text,
    )


def normalize_tech_stack(text: str, code_files: Sequence[CodeFile] = ()) -> TechStackResult:
    """Parse a tech-stack reply, falling back to an ``unknown`` stack."""
    try:
        return TechStackResult.model_validate(_strip_annotations(extract_json_object(text)))
    except (ParseFailureError, ValidationError, RecursionError) as exc:
        _log_fallback("tech_stack", exc, text)
        return tech_stack_fallback(text, code_files)


# ---------------------------------------------------------- code generation

def codegen_fallback(text: str, options: CodeGenOptions) -> CodeGenResult:
    """Hand the whole reply back as one manual-review suggestion."""
    return CodeGenResult(
        framework=options.framework,
        suggestions=[
            CodeSuggestion(
                file="",
                code=text,
                description="Unstructured model output; review and apply manually",
                type="manual",
            )
        ],
        dependencies=[],
        notes="The model reply did not contain a structured JSON object; the raw reply is included as-is.",
        confidence=FALLBACK_CONFIDENCE,
        raw_analysis=text,
    )


def normalize_codegen(text: str, options: CodeGenOptions) -> CodeGenResult:
    """Parse a code generation reply; the requested framework fills a blank one."""
    try:
        data = _strip_annotations(extract_json_object(text))
        result = CodeGenResult.model_validate(data)
    except (ParseFailureError, ValidationError, RecursionError) as exc:
        _log_fallback("codegen", exc, text)
        return codegen_fallback(text, options)
    if not result.framework:
        result.framework = options.framework
    return result


__all__ = [
    "extract_json_object",
    "preview",
    "analysis_fallback",
    "normalize_analysis",
    "tech_stack_fallback",
    "normalize_tech_stack",
    "codegen_fallback",
    "normalize_codegen",
]
