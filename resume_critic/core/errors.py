from __future__ import annotations


class ResumeCriticError(RuntimeError):
    """Base error for every failure surfaced by the resume endpoints.

    ``code`` is a stable machine-readable tag, ``status_code`` the HTTP status
    the API layer answers with.
    """

    code = "internal_error"
    status_code = 500

    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class MissingInput(ResumeCriticError):
    code = "missing_input"
    status_code = 400


class UnsupportedFormat(ResumeCriticError):
    code = "unsupported_format"
    status_code = 400


class ExtractionFailure(ResumeCriticError):
    code = "extraction_failure"


class EmptyContent(ResumeCriticError):
    code = "empty_content"


class MalformedAIResponse(ResumeCriticError):
    code = "malformed_ai_response"


class SchemaViolation(ResumeCriticError):
    code = "schema_violation"


class AIServiceError(ResumeCriticError):
    code = "ai_unavailable"
