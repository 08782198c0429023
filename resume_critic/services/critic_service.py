from __future__ import annotations

import asyncio
import logging
from datetime import date

from resume_critic.ai.types import AIClient
from resume_critic.core.config import settings
from resume_critic.core.errors import AIServiceError, ResumeCriticError
from resume_critic.parsing import UploadedDocument, extract_resume_text
from resume_critic.schemas import Critique, RewrittenResume

from .ai_response import parse_critique, parse_rewritten_resume
from .prompts import build_critique_prompt, build_rewrite_prompt

logger = logging.getLogger(__name__)


async def _generate(ai_client: AIClient, prompt: str, *, timeout_s: float | None) -> str:
    try:
        if timeout_s:
            return await asyncio.wait_for(ai_client.generate(prompt), timeout=timeout_s)
        return await ai_client.generate(prompt)
    except asyncio.TimeoutError as exc:
        raise AIServiceError(f"AI service did not respond within {timeout_s:g} seconds.") from exc
    except ResumeCriticError:
        raise
    except Exception as exc:
        logger.warning("ai_generate_failed prompt_len=%s: %s", len(prompt), exc)
        raise AIServiceError(str(exc) or "AI service request failed.") from exc


async def analyze_resume(
    document: UploadedDocument,
    ai_client: AIClient,
    *,
    today: date | None = None,
    timeout_s: float | None = settings.ai_timeout_s,
) -> Critique:
    resume_text = await asyncio.to_thread(extract_resume_text, document)
    prompt = build_critique_prompt(resume_text, today=today or date.today())
    reply = await _generate(ai_client, prompt, timeout_s=timeout_s)
    return parse_critique(reply)


async def rewrite_resume(
    document: UploadedDocument,
    critique: Critique,
    ai_client: AIClient,
    *,
    today: date | None = None,
    timeout_s: float | None = settings.ai_timeout_s,
) -> RewrittenResume:
    # The full file is extracted again so every page reaches the rewrite.
    resume_text = await asyncio.to_thread(extract_resume_text, document)
    prompt = build_rewrite_prompt(resume_text, critique, today=today or date.today())
    reply = await _generate(ai_client, prompt, timeout_s=timeout_s)
    return parse_rewritten_resume(reply)
