from .detect import detect_mime_type
from .models import UploadedDocument
from .parse import decode_upload, extract_resume_text, extract_text, load_upload

__all__ = [
    "UploadedDocument",
    "decode_upload",
    "detect_mime_type",
    "extract_resume_text",
    "extract_text",
    "load_upload",
]
