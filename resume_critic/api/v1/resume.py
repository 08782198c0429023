from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, Response

from resume_critic.ai.types import AIClient
from resume_critic.api.deps import ai_client_dependency, require_ai_client
from resume_critic.core.errors import MissingInput, ResumeCriticError
from resume_critic.parsing import load_upload
from resume_critic.parsing.detect import DOCX_MIME
from resume_critic.schemas import (
    AnalyzeResumeRequest,
    AnalyzeResumeResponse,
    DownloadResumeRequest,
    ErrorResponse,
    PlainTextResponse,
    RewriteResumeRequest,
    RewriteResumeResponse,
)
from resume_critic.services.critic_service import analyze_resume, rewrite_resume
from resume_critic.services.renderer import render_docx, render_plain_text

logger = logging.getLogger(__name__)

router = APIRouter()

DOWNLOAD_FORMATS = {"txt", "docx", "doc", "pdf"}
ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    413: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


def _failure_response(exc: Exception, error: str, *, route: str) -> JSONResponse:
    if isinstance(exc, MissingInput):
        return _error_response(exc.status_code, str(exc))
    if isinstance(exc, ResumeCriticError):
        logger.warning("%s_failed code=%s: %s", route, exc.code, exc)
        return _error_response(exc.status_code, error, str(exc))
    logger.exception("%s_failed code=unexpected: %s", route, exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, error, str(exc))


def _attachment_headers(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.post("/analyze-resume", response_model=AnalyzeResumeResponse, responses=ERROR_RESPONSES)
async def analyze_resume_endpoint(
    payload: AnalyzeResumeRequest,
    ai_client: AIClient | None = Depends(ai_client_dependency),
):
    try:
        if not payload.resumeText:
            raise MissingInput("No resume file provided")
        document = load_upload(payload.resumeText, payload.mimeType)
        critique = await analyze_resume(document, require_ai_client(ai_client))
    except Exception as exc:
        return _failure_response(exc, "AI analysis failed", route="analyze_resume")
    return AnalyzeResumeResponse(critique=critique)


@router.post("/rewrite-resume", response_model=RewriteResumeResponse, responses=ERROR_RESPONSES)
async def rewrite_resume_endpoint(
    payload: RewriteResumeRequest,
    ai_client: AIClient | None = Depends(ai_client_dependency),
):
    try:
        if not payload.resumeFile or payload.critique is None:
            raise MissingInput("Missing resume file or critique")
        document = load_upload(payload.resumeFile, payload.mimeType)
        rewritten = await rewrite_resume(document, payload.critique, require_ai_client(ai_client))
    except Exception as exc:
        return _failure_response(exc, "Rewrite failed", route="rewrite_resume")
    return RewriteResumeResponse(rewrittenResume=rewritten)


@router.post(
    "/download-resume",
    responses={
        200: {
            "content": {"text/plain": {}, DOCX_MIME: {}},
            "model": PlainTextResponse,
            "description": "Text or Word attachment, or the plain text for client-side PDF rendering.",
        },
        **ERROR_RESPONSES,
    },
)
async def download_resume_endpoint(payload: DownloadResumeRequest):
    try:
        if payload.rewrittenResume is None or not payload.format:
            raise MissingInput("Missing resume data or format")

        file_format = payload.format.strip().lower()
        if file_format not in DOWNLOAD_FORMATS:
            return _error_response(status.HTTP_400_BAD_REQUEST, "Unsupported format")

        resume = payload.rewrittenResume
        if file_format == "txt":
            return Response(
                content=render_plain_text(resume),
                media_type="text/plain",
                headers=_attachment_headers("resume.txt"),
            )

        if file_format in {"docx", "doc"}:
            content = await asyncio.to_thread(render_docx, resume)
            return Response(
                content=content,
                media_type=DOCX_MIME,
                headers=_attachment_headers(f"resume.{file_format}"),
            )

        # PDF is rendered client-side from the plain text.
        return PlainTextResponse(plainText=render_plain_text(resume))
    except Exception as exc:
        return _failure_response(exc, "Download failed", route="download_resume")
