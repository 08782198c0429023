from __future__ import annotations

from pydantic import BaseModel

from .resume import Critique, RewrittenResume


class AnalyzeResumeRequest(BaseModel):
    resumeText: str | None = None
    mimeType: str | None = None


class AnalyzeResumeResponse(BaseModel):
    success: bool = True
    critique: Critique


class RewriteResumeRequest(BaseModel):
    resumeFile: str | None = None
    mimeType: str | None = None
    critique: Critique | None = None


class RewriteResumeResponse(BaseModel):
    success: bool = True
    rewrittenResume: RewrittenResume


class DownloadResumeRequest(BaseModel):
    rewrittenResume: RewrittenResume | None = None
    format: str | None = None


class PlainTextResponse(BaseModel):
    success: bool = True
    plainText: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: str | None = None


class HealthResponse(BaseModel):
    status: str
    message: str
