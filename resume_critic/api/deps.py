from __future__ import annotations

import logging

from fastapi import Request

from resume_critic.ai.config import load_ai_config
from resume_critic.ai.factory import get_ai_client
from resume_critic.ai.types import AIClient
from resume_critic.core.errors import AIServiceError

logger = logging.getLogger(__name__)


def ai_client_dependency(request: Request) -> AIClient | None:
    """Return the application's AI client, building it on first use if needed.

    ``None`` means no provider could be configured; handlers report that
    through :func:`require_ai_client` once the request input is validated.
    A failed build is remembered in ``app.state.ai_client_error`` and not
    retried until the process restarts.
    """
    state = request.app.state
    client = getattr(state, "ai_client", None)
    if client is not None:
        return client
    if getattr(state, "ai_client_error", None):
        return None
    try:
        client = get_ai_client(load_ai_config())
    except (RuntimeError, ValueError) as exc:
        state.ai_client_error = str(exc)
        logger.warning("ai_client_unavailable: %s", exc)
        return None
    state.ai_client = client
    return client


def require_ai_client(client: AIClient | None) -> AIClient:
    if client is None:
        raise AIServiceError("AI service is not configured. Set GEMINI_API_KEY or OPENAI_API_KEY.")
    return client
