"""
Request models public surface.

This module re-exports the one-class-per-file implementations under
``designdiff.base.models_parts``.
"""

from .models_parts.provider_name import PROVIDER_ALIASES, ProviderName
from .models_parts.analysis_request import REQUIRED_IMAGES, AnalysisRequest
from .models_parts.code_file import CodeFile
from .models_parts.codegen_options import CodeGenOptions
from .models_parts.model_info import ModelInfo

__all__ = [
    "ProviderName",
    "PROVIDER_ALIASES",
    "AnalysisRequest",
    "REQUIRED_IMAGES",
    "CodeFile",
    "CodeGenOptions",
    "ModelInfo",
]
