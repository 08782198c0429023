from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedDocument:
    """Raw upload bytes plus the caller's MIME hint, alive for one request."""

    content: bytes
    mime_hint: str | None = None
