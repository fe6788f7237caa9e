"""Credential-missing error raised by adapters before any network call."""
from __future__ import annotations

from dataclasses import dataclass

from ..constants import MISSING_API_KEY_ERROR
from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class CredentialMissingError(ProviderError):
    """No per-call API key was supplied and no default credential is configured.

    The orchestrator converts this into a zero-confidence result; it never
    reaches HTTP callers as an exception.
    """

    code: ErrorCode = ErrorCode.AUTH
    message: str = MISSING_API_KEY_ERROR
    provider: str = "unknown"


__all__ = ["CredentialMissingError"]
