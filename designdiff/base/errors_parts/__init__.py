"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `designdiff.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .credential_missing import CredentialMissingError
from .upstream_call_failed import UpstreamCallFailedError
from .parse_failure import ParseFailureError
from .boundary import InputArityError, UnsupportedProviderError
from .classification import RETRYABLE_CODES, classify_exception

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
