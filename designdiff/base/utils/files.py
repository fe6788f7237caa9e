"""Source file classification helpers.

Used by the tech-stack fallback (to describe files when the model reply is
unusable) and by the HTTP layer (to skip uploads that are not source code).
"""
from __future__ import annotations

import os
from typing import Dict

VALID_CODE_EXTENSIONS = (
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    ".vue",
    ".dart",
    ".swift",
    ".kt",
    ".java",
    ".py",
    ".css",
    ".scss",
    ".html",
    ".json",
    ".xml",
)

FILE_TYPE_BY_EXTENSION: Dict[str, str] = {
    ".tsx": "react-component",
    ".jsx": "react-component",
    ".ts": "typescript",
    ".js": "javascript",
    ".vue": "vue-component",
    ".dart": "flutter",
    ".swift": "ios",
    ".kt": "android",
}


def file_extension(filename: str) -> str:
    return os.path.splitext(filename or "")[1].lower()


def is_code_file(filename: str) -> bool:
    """True when ``filename`` has one of the accepted source extensions."""
    return file_extension(filename) in VALID_CODE_EXTENSIONS


def file_type(filename: str) -> str:
    """Map a file name to a coarse role (``react-component``, ``flutter``...)."""
    return FILE_TYPE_BY_EXTENSION.get(file_extension(filename), "unknown")


__all__ = [
    "VALID_CODE_EXTENSIONS",
    "FILE_TYPE_BY_EXTENSION",
    "file_extension",
    "is_code_file",
    "file_type",
]
