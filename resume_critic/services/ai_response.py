from __future__ import annotations

import json
import re
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from resume_critic.core.errors import MalformedAIResponse, SchemaViolation
from resume_critic.schemas import Critique, RewrittenResume

_FENCE_RE = re.compile(r"```json|```")

ModelT = TypeVar("ModelT", bound=BaseModel)


def strip_code_fences(text: str) -> str:
    """Remove every ```json / ``` marker from ``text`` and trim the result."""
    return _FENCE_RE.sub("", text or "").strip()


def parse_ai_json(text: str) -> Any:
    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedAIResponse(f"AI service returned invalid JSON: {exc.msg}") from exc


def _validate(payload: Any, model: type[ModelT]) -> ModelT:
    if not isinstance(payload, dict):
        raise SchemaViolation(f"Expected a JSON object for {model.__name__}, got {type(payload).__name__}.")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in exc.errors()[:5]
        )
        raise SchemaViolation(f"AI response does not match {model.__name__}: {problems}") from exc


def parse_critique(text: str) -> Critique:
    return _validate(parse_ai_json(text), Critique)


def parse_rewritten_resume(text: str) -> RewrittenResume:
    return _validate(parse_ai_json(text), RewrittenResume)
