"""
OpenAI provider package.

Exports:
- OpenAIProvider: VisionProvider adapter over the Chat Completions API
"""

from .client import OpenAIProvider

__all__ = ["OpenAIProvider"]
