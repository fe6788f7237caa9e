"""Interfaces parts package: one Protocol per module."""

from .has_default_model import HasDefaultModel
from .vision_provider import VisionProvider

__all__ = ["HasDefaultModel", "VisionProvider"]
