"""Raised internally when a model reply carries no usable JSON object."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class ParseFailureError(ProviderError):
    """The normalizer could not extract or validate a JSON object.

    Always absorbed by the normalizer, which synthesizes a fallback result.
    """

    code: ErrorCode = ErrorCode.VALIDATION
    message: str = "no JSON object found in model reply"
    provider: str = "unknown"


__all__ = ["ParseFailureError"]
