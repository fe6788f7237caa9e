"""
Provider interface Protocols public surface.

Re-exports the one-class-per-file Protocols under
``designdiff.base.interfaces_parts``.
"""

from .interfaces_parts.has_default_model import HasDefaultModel
from .interfaces_parts.vision_provider import VisionProvider

__all__ = ["HasDefaultModel", "VisionProvider"]
