from __future__ import annotations

import os

import uvicorn

from designdiff.config.defaults import SERVICE_DEFAULT_HOST, SERVICE_DEFAULT_PORT


def _parse_port(value: str | None, default: int) -> int:
    """Best-effort parse of a port from string, falling back to ``default``."""
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def main() -> None:
    """Start the development server for the designdiff FastAPI app.

    Environment:

    - DESIGNDIFF_HOST: interface to bind (default "127.0.0.1")
    - DESIGNDIFF_PORT: port to bind (default 3001)
    - DESIGNDIFF_RELOAD: "true"/"false" to toggle auto-reload (default true)
    """
    host = os.getenv("DESIGNDIFF_HOST", SERVICE_DEFAULT_HOST)
    port = _parse_port(os.getenv("DESIGNDIFF_PORT"), SERVICE_DEFAULT_PORT)
    reload_enabled = os.getenv("DESIGNDIFF_RELOAD", "true").lower() == "true"

    uvicorn.run(
        "designdiff.service.app:app",
        host=host,
        port=port,
        reload=reload_enabled,
    )


if __name__ == "__main__":
    main()
