"""Base shared constants for provider adapters and the normalizer.

Central location to avoid scattering magic strings and default numbers.

Security
--------
This module contains only generic sentinel strings and numeric defaults.
There are no credentials or tokens embedded.

# pragma: allowlist secret
"""
from __future__ import annotations

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

# Output token budgets per capability
ANALYZE_MAX_TOKENS = 4000
TECH_STACK_MAX_TOKENS = 1000
CODEGEN_MAX_TOKENS = 2000
PROBE_MAX_TOKENS = 1

# Near-deterministic sampling for every capability
DEFAULT_TEMPERATURE = 0.1

# Per-file content cap when building tech-stack prompts (characters)
CODE_FILE_CHAR_CAP = 2000

# Fallback synthesis
FALLBACK_CONFIDENCE = 0.7
FAILURE_CONFIDENCE = 0.0
DESCRIPTION_PREVIEW_CHARS = 200
DESCRIPTION_ELLIPSIS = "..."

# Image MIME type used when magic-byte sniffing is inconclusive
DEFAULT_IMAGE_MIME = "image/jpeg"

__all__ = [
    "MISSING_API_KEY_ERROR",
    "ANALYZE_MAX_TOKENS",
    "TECH_STACK_MAX_TOKENS",
    "CODEGEN_MAX_TOKENS",
    "PROBE_MAX_TOKENS",
    "DEFAULT_TEMPERATURE",
    "CODE_FILE_CHAR_CAP",
    "FALLBACK_CONFIDENCE",
    "FAILURE_CONFIDENCE",
    "DESCRIPTION_PREVIEW_CHARS",
    "DESCRIPTION_ELLIPSIS",
    "DEFAULT_IMAGE_MIME",
]
