"""Models parts package public surface.

Re-exports the request dataclasses; `designdiff.base.models` remains the
primary stable import path.
"""

from .provider_name import PROVIDER_ALIASES, ProviderName
from .analysis_request import REQUIRED_IMAGES, AnalysisRequest
from .code_file import CodeFile
from .codegen_options import CodeGenOptions
from .model_info import ModelInfo

__all__ = [
    "ProviderName",
    "PROVIDER_ALIASES",
    "AnalysisRequest",
    "REQUIRED_IMAGES",
    "CodeFile",
    "CodeGenOptions",
    "ModelInfo",
]
