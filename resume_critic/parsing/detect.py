from __future__ import annotations

from io import BytesIO
from zipfile import BadZipFile, ZipFile

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME = "application/msword"
TEXT_MIME = "text/plain"

WORD_MIME_TYPES = frozenset({DOCX_MIME, DOC_MIME})

PDF_MAGIC = b"%PDF-"
OLE2_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"
ZIP_MAGICS = (b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08")


def _is_zip_payload(content: bytes) -> bool:
    return any(content.startswith(prefix) for prefix in ZIP_MAGICS)


def _zip_has_paths(content: bytes, prefixes: tuple[str, ...]) -> bool:
    try:
        with ZipFile(BytesIO(content)) as archive:
            names = archive.namelist()
    except (BadZipFile, OSError, ValueError):
        return False
    return any(any(name.startswith(prefix) for prefix in prefixes) for name in names)


def normalize_mime_hint(hint: str | None) -> str:
    if not hint:
        return ""
    return hint.split(";", 1)[0].strip().lower()


def sniff_mime_type(content: bytes) -> str | None:
    """Classify ``content`` by its leading bytes, or ``None`` when unknown."""
    if content.startswith(PDF_MAGIC):
        return PDF_MIME
    if _is_zip_payload(content) and _zip_has_paths(content, ("word/",)):
        return DOCX_MIME
    if content.startswith(OLE2_MAGIC):
        return DOC_MIME
    return None


def detect_mime_type(content: bytes, hint: str | None = None) -> str:
    return sniff_mime_type(content) or normalize_mime_hint(hint)
