"""Wrapper for any transport, auth or quota failure of a vendor call."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class UpstreamCallFailedError(ProviderError):
    """A vendor SDK call failed or returned no usable text.

    ``raw`` holds the original SDK exception (``None`` for empty replies) and
    ``code`` its classification from :func:`classify_exception`.
    """

    code: ErrorCode = ErrorCode.UNKNOWN
    message: str = "upstream call failed"
    provider: str = "unknown"


__all__ = ["UpstreamCallFailedError"]
