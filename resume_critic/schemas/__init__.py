from .api import (
    AnalyzeResumeRequest,
    AnalyzeResumeResponse,
    DownloadResumeRequest,
    ErrorResponse,
    HealthResponse,
    PlainTextResponse,
    RewriteResumeRequest,
    RewriteResumeResponse,
)
from .resume import Critique, EducationEntry, ExperienceEntry, Referee, RewrittenResume

__all__ = [
    "Critique",
    "ExperienceEntry",
    "EducationEntry",
    "Referee",
    "RewrittenResume",
    "AnalyzeResumeRequest",
    "AnalyzeResumeResponse",
    "RewriteResumeRequest",
    "RewriteResumeResponse",
    "DownloadResumeRequest",
    "PlainTextResponse",
    "ErrorResponse",
    "HealthResponse",
]
