"""designdiff.config.defaults
=========================

Small, stable default values used by the adapters and the service layer.
They can be overridden via environment variables or the external config
file; this module performs no I/O and imports nothing from the package.
"""

from __future__ import annotations

# ---- Service / HTTP layer ----

# Comma-separated list of allowed origins for the HTTP service.
SERVICE_CORS_DEFAULT_ORIGINS = "http://localhost:3000,http://localhost:3001"
SERVICE_DEFAULT_HOST = "127.0.0.1"
SERVICE_DEFAULT_PORT = 3001
SERVICE_API_PREFIX = "/api"

# Upload limits for the HTTP boundary.
SERVICE_MAX_IMAGES = 2
SERVICE_MAX_CODE_FILES = 10

# Provider used by the HTTP boundary when the form omits one.
SERVICE_DEFAULT_PROVIDER = "openai"


# ---- Provider-specific defaults ----

# OpenAI (SDK uses api.openai.com when base_url is omitted).
OPENAI_DEFAULT_MODEL = "gpt-4o"

# Anthropic
ANTHROPIC_DEFAULT_MODEL = "claude-3-5-sonnet-20241022"

# Gemini: vision capable model for screenshot comparison, faster text model
# for tech-stack detection and code generation.
GEMINI_DEFAULT_MODEL = "gemini-1.5-pro"
GEMINI_DEFAULT_TEXT_MODEL = "gemini-2.0-flash"


__all__ = [
    "SERVICE_CORS_DEFAULT_ORIGINS",
    "SERVICE_DEFAULT_HOST",
    "SERVICE_DEFAULT_PORT",
    "SERVICE_API_PREFIX",
    "SERVICE_MAX_IMAGES",
    "SERVICE_MAX_CODE_FILES",
    "SERVICE_DEFAULT_PROVIDER",
    "OPENAI_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_MODEL",
    "GEMINI_DEFAULT_MODEL",
    "GEMINI_DEFAULT_TEXT_MODEL",
]
