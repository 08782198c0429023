from dataclasses import dataclass

from resume_critic.core.config import Settings, settings as default_settings


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    gemini_api_key: str | None = None
    gemini_api_version: str = "v1"
    openai_api_key: str | None = None
    openai_base_url: str | None = None


def load_ai_config(settings: Settings | None = None) -> AIConfig:
    cfg = settings or default_settings
    return AIConfig(
        provider=cfg.ai_provider,
        model=cfg.ai_model,
        gemini_api_key=cfg.gemini_api_key,
        gemini_api_version=cfg.gemini_api_version,
        openai_api_key=cfg.openai_api_key,
        openai_base_url=cfg.openai_base_url,
    )
