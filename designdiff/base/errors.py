"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``designdiff.base.errors_parts`` to maintain a stable import path.

Propagation policy:
    * ``UnsupportedProviderError`` and ``InputArityError`` are boundary
      errors and are raised to callers.
    * ``CredentialMissingError``, ``UpstreamCallFailedError`` and
      ``ParseFailureError`` are absorbed by the orchestrator/normalizer and
      turned into low-confidence results.
"""

from .errors_parts import (
    RETRYABLE_CODES,
    CredentialMissingError,
    ErrorCode,
    InputArityError,
    ParseFailureError,
    ProviderError,
    UnsupportedProviderError,
    UpstreamCallFailedError,
    classify_exception,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "CredentialMissingError",
    "UpstreamCallFailedError",
    "ParseFailureError",
    "InputArityError",
    "UnsupportedProviderError",
    "RETRYABLE_CODES",
    "classify_exception",
]
