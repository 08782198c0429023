from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float | None) -> float | None:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    ai_provider: str
    ai_model: str
    ai_timeout_s: float | None
    gemini_api_key: str | None
    gemini_api_version: str
    openai_api_key: str | None
    openai_base_url: str | None
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool
    max_body_bytes: int
    keep_alive_url: str | None
    keep_alive_interval_s: int
    host: str
    port: int


def load_settings() -> Settings:
    return Settings(
        ai_provider=(_get_env("AI_PROVIDER", "gemini") or "gemini").strip().lower(),
        ai_model=(_get_env("AI_MODEL", "gemini-2.5-flash") or "gemini-2.5-flash").strip(),
        ai_timeout_s=_get_env_float("AI_TIMEOUT_S", None),
        gemini_api_key=_get_env("GEMINI_API_KEY"),
        gemini_api_version=_get_env("GEMINI_API_VERSION", "v1") or "v1",
        openai_api_key=_get_env("OPENAI_API_KEY"),
        openai_base_url=_get_env("OPENAI_BASE_URL"),
        log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
        sentry_dsn=_get_env("SENTRY_DSN"),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            [
                "http://localhost:5173",
                "https://resumecritic.netlify.app",
            ],
        ),
        cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", True),
        max_body_bytes=_get_env_int("MAX_BODY_BYTES", 50 * 1024 * 1024),
        keep_alive_url=(_get_env("RENDER_URL") or "").rstrip("/") or None,
        keep_alive_interval_s=_get_env_int("KEEP_ALIVE_INTERVAL_S", 600),
        host=_get_env("HOST", "0.0.0.0") or "0.0.0.0",
        port=_get_env_int("PORT", 3000),
    )


settings = load_settings()

if settings.ai_provider not in {"gemini", "openai"}:
    raise RuntimeError("AI_PROVIDER must be either 'gemini' or 'openai'.")
