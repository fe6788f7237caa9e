"""Prompt builders shared by every provider adapter.

Each capability has exactly one prompt, so switching providers changes the
vendor but never the question. The prompts describe the JSON shape the
normalizer expects; replies that ignore it still degrade gracefully through
the normalizer fallback.
"""
from __future__ import annotations

import json
from typing import Any, List, Optional, Sequence

from .constants import CODE_FILE_CHAR_CAP
from .models import CodeFile, CodeGenOptions

_ANALYSIS_TEMPLATE = """You are a UI/UX expert. Compare these two images: the first is the current UI, the second is the target design.

Analyze the differences and provide:
1. A list of specific differences (layout, colors, typography, spacing, components)
2. Code suggestions to transform the current UI to match the target
3. Priority level for each change (high, medium, low)
4. Estimated effort (quick, moderate, complex)
{framework_line}
Return the response as a JSON object with this structure:
{{
  "differences": [
    {{
      "type": "color|spacing|typography|layout|component",
      "severity": "high|medium|low",
      "description": "detailed description",
      "currentValue": "current state",
      "targetValue": "target state",
      "coordinates": {{"x": 0, "y": 0, "width": 0, "height": 0}}
    }}
  ],
  "suggestions": [
    {{
      "type": "css|component|layout|styling",
      "description": "what to change",
      "code": "actual code snippet",
      "framework": "{framework}",
      "priority": "high|medium|low",
      "estimatedEffort": "quick|moderate|complex"
    }}
  ],
  "confidence": 0.85
}}"""

_TECH_STACK_TEMPLATE = """Analyze these code files and detect the technology stack. Return a JSON object with:
{{
  "framework": "react|vue|angular|svelte|flutter|react-native|swift|kotlin",
  "language": "typescript|javascript|dart|swift|kotlin|java",
  "platform": "web|mobile|desktop",
  "confidence": 0.95,
  "autoDetected": true,
  "detectedFiles": [
    {{
      "filename": "file.tsx",
      "type": "react-component",
      "confidence": 0.9
    }}
  ],
  "reasoning": "Brief explanation of detection"
}}

Code files:
{files}"""

_CODEGEN_TEMPLATE = """Generate {framework} code to implement the following changes:

Description: {description}
{target_line}{differences_block}
Provide practical, working code that can be directly implemented. Include:
1. Component code (if applicable)
2. Styling (CSS/styled-components/etc.)
3. Any necessary imports or dependencies
4. Brief implementation notes

Return as JSON:
{{
  "framework": "{framework}",
  "suggestions": [
    {{
      "file": "component/file/path",
      "code": "actual code here",
      "description": "what this code does",
      "type": "component|style|config"
    }}
  ],
  "dependencies": ["any new dependencies needed"],
  "notes": "implementation guidance"
}}"""

PROBE_PROMPT = "Hello"


def build_analysis_prompt(framework: Optional[str] = None) -> str:
    """Prompt asking for an AnalysisResult-shaped comparison of two screenshots."""
    framework_line = (
        f"\nThe project uses {framework} framework. Provide framework-specific code suggestions.\n"
        if framework
        else ""
    )
    return _ANALYSIS_TEMPLATE.format(framework_line=framework_line, framework=framework or "css")


def format_code_files(code_files: Sequence[CodeFile]) -> str:
    """Fence each file under its name, truncating content to the per-file cap."""
    blocks = [
        f"File: {f.filename}\n```\n{f.content[:CODE_FILE_CHAR_CAP]}\n```"
        for f in code_files
    ]
    return "\n\n".join(blocks)


def build_tech_stack_prompt(code_files: Sequence[CodeFile]) -> str:
    return _TECH_STACK_TEMPLATE.format(files=format_code_files(code_files))


def _serialize_differences(differences: Sequence[Any]) -> List[Any]:
    out: List[Any] = []
    for diff in differences:
        to_dict = getattr(diff, "to_dict", None)
        out.append(to_dict() if callable(to_dict) else diff)
    return out


def build_codegen_prompt(options: CodeGenOptions) -> str:
    """Prompt asking for a CodeGenResult-shaped bundle for ``options``."""
    target_line = f"Target Element: {options.target_element}\n" if options.target_element else ""
    differences_block = ""
    if options.differences:
        serialized = json.dumps(_serialize_differences(options.differences), indent=2, default=str)
        differences_block = f"\nDifferences to address:\n{serialized}\n"
    return _CODEGEN_TEMPLATE.format(
        framework=options.framework,
        description=options.description,
        target_line=target_line,
        differences_block=differences_block,
    )


__all__ = [
    "PROBE_PROMPT",
    "build_analysis_prompt",
    "build_tech_stack_prompt",
    "build_codegen_prompt",
    "format_code_files",
]
