"""
Gemini provider package.

Exports:
- GeminiProvider: VisionProvider adapter over the Google GenAI SDK
"""

from .client import GeminiProvider

__all__ = ["GeminiProvider"]
