"""designdiff: compare UI screenshots, detect tech stacks and generate code
through interchangeable LLM providers (OpenAI, Anthropic, Gemini).

Public surface::

    from designdiff import analyze_images, detect_tech_stack, generate_code

Each call returns a canonical pydantic result. Provider trouble (missing
key, failed call, unparseable reply) never raises; it lowers ``confidence``.
Only ``UnsupportedProviderError`` and ``InputArityError`` propagate.
"""

__version__ = "0.1.0"

from .base.dto import AnalysisResult, CodeGenResult, TechStackResult
from .base.errors import InputArityError, UnsupportedProviderError
from .base.models import AnalysisRequest, CodeFile, CodeGenOptions, ProviderName
from .service.orchestrator import (
    AnalysisOrchestrator,
    analyze_images,
    detect_tech_stack,
    generate_code,
)

__all__ = [
    "__version__",
    "AnalysisResult",
    "CodeGenResult",
    "TechStackResult",
    "InputArityError",
    "UnsupportedProviderError",
    "AnalysisRequest",
    "CodeFile",
    "CodeGenOptions",
    "ProviderName",
    "AnalysisOrchestrator",
    "analyze_images",
    "detect_tech_stack",
    "generate_code",
]
