"""Lenient value coercions shared by the result DTOs.

Model replies are loosely shaped: enum members drift ("critical", "CSS"),
numbers arrive as strings, lists arrive as ``null``. These helpers map such
values onto the canonical vocabulary instead of failing validation, which
keeps a mostly-correct reply usable.
"""
from __future__ import annotations

import json
import math
from typing import Any, Iterable, List


def coerce_choice(value: Any, allowed: Iterable[str], default: str) -> str:
    """Return ``value`` lower-cased when it is an allowed member, else ``default``."""
    if isinstance(value, str):
        v = value.strip().lower()
        if v in allowed:
            return v
    return default


def coerce_text(value: Any) -> str:
    """Render scalars and containers as text; ``None`` becomes the empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def coerce_confidence(value: Any, default: float) -> float:
    """Parse a confidence score and clamp it into ``[0, 1]``.

    Non-numeric and NaN values fall back to ``default``. Only explicit
    percentages (``"85%"``) are scaled down; bare numbers above 1 clamp to 1.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, str):
        text = value.strip()
        percent = text.endswith("%")
        try:
            num = float(text.rstrip("%"))
        except ValueError:
            return default
        if percent:
            num /= 100.0
    elif isinstance(value, (int, float)):
        try:
            num = float(value)
        except OverflowError:
            num = math.inf if value > 0 else -math.inf
    else:
        return default
    if math.isnan(num):
        return default
    return min(1.0, max(0.0, num))


def coerce_list(value: Any) -> List[Any]:
    """``None`` becomes an empty list, a lone item becomes a one-item list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return [value]


__all__ = ["coerce_choice", "coerce_text", "coerce_confidence", "coerce_list"]
