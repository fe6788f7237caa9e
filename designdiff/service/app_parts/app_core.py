from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, TypeVar

from fastapi import HTTPException, UploadFile
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from designdiff.base.errors import InputArityError, UnsupportedProviderError
from designdiff.base.models import AnalysisRequest, CodeFile, CodeGenOptions
from designdiff.base.utils import SUPPORTED_IMAGE_MIME_TYPES, is_code_file
from designdiff.config.defaults import SERVICE_DEFAULT_PROVIDER, SERVICE_MAX_CODE_FILES, SERVICE_MAX_IMAGES
from designdiff.service.orchestrator import AnalysisOrchestrator, get_orchestrator

T = TypeVar("T")


class GenerateCodeBody(BaseModel):
    """JSON body of ``POST /api/ai/generate-code``.

    Accepts camelCase (``targetElement``, ``apiKey``) or snake_case keys.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    framework: str
    description: str
    target_element: Optional[str] = None
    differences: Optional[List[Dict[str, Any]]] = None
    provider: str = SERVICE_DEFAULT_PROVIDER
    model: Optional[str] = None
    api_key: Optional[str] = None

    def to_options(self) -> CodeGenOptions:
        return CodeGenOptions(
            framework=self.framework,
            description=self.description,
            target_element=self.target_element,
            differences=self.differences,
        )


def get_orchestrator_dep() -> AnalysisOrchestrator:
    """FastAPI dependency returning the process-wide orchestrator."""
    return get_orchestrator()


def _call_or_400(fn: Callable[[], T]) -> T:
    """Run ``fn`` and translate boundary errors into ``400 Bad Request``."""
    try:
        return fn()
    except (UnsupportedProviderError, InputArityError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


def _read_images(uploads: Optional[List[UploadFile]]) -> List[bytes]:
    """Return the bytes of each upload after checking its declared MIME type."""
    uploads = uploads or []
    if len(uploads) > SERVICE_MAX_IMAGES:
        raise HTTPException(
            status_code=400,
            detail=f"At most {SERVICE_MAX_IMAGES} images are accepted: the current UI screenshot and the target design",
        )
    images: List[bytes] = []
    for upload in uploads:
        if upload.content_type not in SUPPORTED_IMAGE_MIME_TYPES:
            raise HTTPException(
                status_code=400,
                detail=f"Unsupported image type '{upload.content_type}' for '{upload.filename}'",
            )
        images.append(upload.file.read())
    return images


def _read_code_files(uploads: Optional[List[UploadFile]]) -> List[CodeFile]:
    """Decode source uploads, skipping files without a code extension."""
    uploads = uploads or []
    if len(uploads) > SERVICE_MAX_CODE_FILES:
        raise HTTPException(
            status_code=400,
            detail=f"At most {SERVICE_MAX_CODE_FILES} code files are accepted",
        )
    files: List[CodeFile] = []
    for upload in uploads:
        name = upload.filename or ""
        if not is_code_file(name):
            continue
        content = upload.file.read().decode("utf-8", errors="replace")
        files.append(CodeFile(filename=name, content=content))
    return files


def _handle_analyze(
    orch: AnalysisOrchestrator,
    uploads: Optional[List[UploadFile]],
    *,
    provider: str,
    framework: Optional[str],
    model: Optional[str],
    api_key: Optional[str],
    project_id: Optional[str],
) -> Dict[str, Any]:
    images = _read_images(uploads)

    def run() -> Any:
        request = AnalysisRequest.from_images(
            images,
            provider=provider,
            framework=framework or None,
            model=model or None,
            api_key=api_key or None,
            project_id=project_id or None,
        )
        return orch.analyze(request)

    return _call_or_400(run).to_dict()


def _handle_detect_stack(
    orch: AnalysisOrchestrator,
    uploads: Optional[List[UploadFile]],
    *,
    provider: str,
    model: Optional[str],
    api_key: Optional[str],
) -> Dict[str, Any]:
    files = _read_code_files(uploads)
    result = _call_or_400(
        lambda: orch.detect_tech_stack(
            files, provider=provider, model=model or None, api_key=api_key or None
        )
    )
    return result.to_dict()


def _handle_generate_code(orch: AnalysisOrchestrator, body: GenerateCodeBody) -> Dict[str, Any]:
    result = _call_or_400(
        lambda: orch.generate_code(
            body.to_options(),
            provider=body.provider,
            model=body.model or None,
            api_key=body.api_key or None,
        )
    )
    return result.to_dict()


__all__ = [
    "GenerateCodeBody",
    "get_orchestrator_dep",
    "_call_or_400",
    "_handle_analyze",
    "_handle_detect_stack",
    "_handle_generate_code",
]
