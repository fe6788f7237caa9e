"""Provider-agnostic core: schema, request models, errors, normalizer, factory."""

from .dto import AnalysisResult, CodeGenResult, TechStackResult
from .errors import (
    CredentialMissingError,
    ErrorCode,
    InputArityError,
    ParseFailureError,
    ProviderError,
    UnsupportedProviderError,
    UpstreamCallFailedError,
)
from .factory import ProviderFactory
from .models import AnalysisRequest, CodeFile, CodeGenOptions, ProviderName

__all__ = [
    "AnalysisResult",
    "CodeGenResult",
    "TechStackResult",
    "CredentialMissingError",
    "ErrorCode",
    "InputArityError",
    "ParseFailureError",
    "ProviderError",
    "UnsupportedProviderError",
    "UpstreamCallFailedError",
    "ProviderFactory",
    "AnalysisRequest",
    "CodeFile",
    "CodeGenOptions",
    "ProviderName",
]
