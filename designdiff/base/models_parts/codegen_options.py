"""
CodeGenOptions: what to generate and for which framework.

``differences`` may hold canonical ``Difference`` models or plain mappings
(for example the ``differences`` list of a previous AnalysisResult sent back
by a client); the prompt builder serializes either form.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class CodeGenOptions:
    """Inputs of a code generation request.

    Attributes:
        framework: Target framework, e.g. ``"react"`` or ``"vue"``.
        description: Free-form description of the change to implement.
        target_element: Optional selector or component name to focus on.
        differences: Optional differences to address.
    """

    framework: str
    description: str
    target_element: Optional[str] = None
    differences: Optional[Sequence[Any]] = None


__all__ = ["CodeGenOptions"]
