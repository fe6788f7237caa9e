"""
Anthropic provider package.

Exports:
- AnthropicProvider: VisionProvider adapter over the Messages API
"""

from .client import AnthropicProvider

__all__ = ["AnthropicProvider"]
