"""Orchestration, model catalog and HTTP service layer."""

from .orchestrator import (
    AnalysisOrchestrator,
    analyze_images,
    detect_tech_stack,
    generate_code,
    get_orchestrator,
)

__all__ = [
    "AnalysisOrchestrator",
    "analyze_images",
    "detect_tech_stack",
    "generate_code",
    "get_orchestrator",
]
