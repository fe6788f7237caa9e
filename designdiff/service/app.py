from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, File, Form, Query, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from designdiff import __version__
from designdiff.config.defaults import SERVICE_CORS_DEFAULT_ORIGINS, SERVICE_DEFAULT_PROVIDER
from designdiff.service.orchestrator import AnalysisOrchestrator

from .app_parts.app_core import (
    GenerateCodeBody,
    _call_or_400,
    _handle_analyze,
    _handle_detect_stack,
    _handle_generate_code,
    get_orchestrator_dep,
)
from .catalog import list_models, test_model_availability


app = FastAPI(title="designdiff", version=__version__)


# ---------------------------------------------------------------------------
# CORS configuration
# ---------------------------------------------------------------------------

cors_origins_env = os.getenv("DESIGNDIFF_CORS_ORIGINS", SERVICE_CORS_DEFAULT_ORIGINS)
allow_origins = [o.strip() for o in cors_origins_env.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


@app.get("/api/health")
def health() -> Dict[str, Any]:
    """Report that the service is up."""
    return {"ok": True}


# ---------------------------------------------------------------------------
# Analysis endpoints
# ---------------------------------------------------------------------------


@app.post("/api/ai/analyze")
def post_analyze(
    images: Optional[List[UploadFile]] = File(None),
    provider: str = Form(SERVICE_DEFAULT_PROVIDER),
    framework: Optional[str] = Form(None),
    model: Optional[str] = Form(None),
    api_key: Optional[str] = Form(None, alias="apiKey"),
    project_id: Optional[str] = Form(None, alias="projectId"),
    orch: AnalysisOrchestrator = Depends(get_orchestrator_dep),
) -> Dict[str, Any]:
    """Compare two uploaded screenshots (current, then target).

    Always 200 with an AnalysisResult once the request is well-formed; a
    failed provider call shows up as a zero-confidence result.
    """
    return _handle_analyze(
        orch,
        images,
        provider=provider,
        framework=framework,
        model=model,
        api_key=api_key,
        project_id=project_id,
    )


@app.post("/api/ai/detect-stack")
def post_detect_stack(
    code_files: Optional[List[UploadFile]] = File(None, alias="codeFiles"),
    provider: str = Form(SERVICE_DEFAULT_PROVIDER),
    model: Optional[str] = Form(None),
    api_key: Optional[str] = Form(None, alias="apiKey"),
    orch: AnalysisOrchestrator = Depends(get_orchestrator_dep),
) -> Dict[str, Any]:
    """Detect the tech stack of up to ten uploaded source files."""
    return _handle_detect_stack(orch, code_files, provider=provider, model=model, api_key=api_key)


@app.post("/api/ai/generate-code")
def post_generate_code(
    body: GenerateCodeBody,
    orch: AnalysisOrchestrator = Depends(get_orchestrator_dep),
) -> Dict[str, Any]:
    """Generate framework code for a described change."""
    return _handle_generate_code(orch, body)


# ---------------------------------------------------------------------------
# Model catalog endpoints
# ---------------------------------------------------------------------------


@app.get("/api/ai/models")
def get_models(provider: Optional[str] = None) -> Dict[str, Any]:
    """Return the model catalog for one provider or for all of them."""
    return _call_or_400(lambda: list_models(provider))


@app.get("/api/ai/models/test")
def get_model_test(
    provider: str,
    model: str,
    api_key: Optional[str] = Query(None, alias="apiKey"),
    orch: AnalysisOrchestrator = Depends(get_orchestrator_dep),
) -> Dict[str, Any]:
    """Probe whether ``model`` answers for ``provider`` with the given key."""
    return _call_or_400(
        lambda: test_model_availability(provider, model, api_key or None, orchestrator=orch)
    )


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def get_app() -> FastAPI:
    """Return the FastAPI application instance."""
    return app
