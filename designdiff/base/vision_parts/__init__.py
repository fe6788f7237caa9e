"""Shared adapter scaffolding for the vision providers."""

from .base import ANALYZE, CODEGEN, PROBE, TECH_STACK, BaseVisionProvider

__all__ = ["BaseVisionProvider", "ANALYZE", "TECH_STACK", "CODEGEN", "PROBE"]
