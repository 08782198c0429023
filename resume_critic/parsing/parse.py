from __future__ import annotations

import base64
import binascii
import logging

from resume_critic.core.errors import EmptyContent, ExtractionFailure, UnsupportedFormat

from .detect import PDF_MIME, WORD_MIME_TYPES, detect_mime_type
from .extractors import (
    extract_docx_text,
    extract_pdf_text,
    extract_pdf_text_without_fonts,
    extract_plain_text,
)
from .models import UploadedDocument

logger = logging.getLogger(__name__)

MIN_TEXT_CHARS = 10
DATA_URL_MARKER = "base64,"
UNSUPPORTED_FORMAT_MESSAGE = "Unsupported file type. Please upload a PDF, DOCX, DOC, or TXT file."
EMPTY_CONTENT_MESSAGE = "The file appears to be empty or image-based (e.g. a scanned PDF)."


def decode_upload(payload: str) -> bytes:
    """Decode a base64 upload, dropping a leading ``data:...;base64,`` prefix."""
    data = payload.split(DATA_URL_MARKER, 1)[1] if DATA_URL_MARKER in payload else payload
    data = "".join(data.split())
    data += "=" * (-len(data) % 4)
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise UnsupportedFormat("Uploaded file is not valid base64 data.") from exc


def load_upload(payload: str, mime_hint: str | None = None) -> UploadedDocument:
    return UploadedDocument(content=decode_upload(payload), mime_hint=mime_hint)


def _is_font_error(exc: Exception) -> bool:
    return "font" in str(exc).lower()


def _extract_pdf(content: bytes) -> str:
    try:
        return extract_pdf_text(content)
    except Exception as exc:
        if not _is_font_error(exc):
            raise ExtractionFailure(f"Could not read PDF file: {exc}") from exc
        logger.warning("pdf_font_fallback error=%s", exc)
    try:
        return extract_pdf_text_without_fonts(content)
    except Exception as exc:
        raise ExtractionFailure(f"Could not read PDF file: {exc}") from exc


def _extract_word(content: bytes) -> str:
    try:
        return extract_docx_text(content)
    except Exception as exc:
        raise ExtractionFailure(f"Could not read Word document: {exc}") from exc


def extract_text(content: bytes, mime_hint: str | None = None) -> str:
    mime = detect_mime_type(content, mime_hint)

    if mime == PDF_MIME:
        return _extract_pdf(content)

    if mime in WORD_MIME_TYPES:
        return _extract_word(content)

    text = extract_plain_text(content)
    if text.strip():
        return text

    raise UnsupportedFormat(UNSUPPORTED_FORMAT_MESSAGE)


def extract_resume_text(document: UploadedDocument) -> str:
    """Extract the document text, rejecting output too short to be a resume."""
    text = extract_text(document.content, document.mime_hint)
    if len(text.strip()) < MIN_TEXT_CHARS:
        raise EmptyContent(EMPTY_CONTENT_MESSAGE)
    logger.info("resume_text_extracted chars=%s", len(text))
    return text
