from __future__ import annotations

from resume_critic.core.config import settings

ALLOWED_METHODS = ["GET", "POST"]


def cors_allowed_origins() -> list[str]:
    return list(settings.cors_allowed_origins)
