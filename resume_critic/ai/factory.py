from resume_critic.ai.config import AIConfig, load_ai_config
from resume_critic.ai.types import AIClient

from resume_critic.ai.providers.gemini_provider import GeminiProvider
from resume_critic.ai.providers.openai_provider import OpenAIProvider


def get_ai_client(cfg: AIConfig | None = None) -> AIClient:
    cfg = cfg or load_ai_config()

    if cfg.provider == "gemini":
        return GeminiProvider(
            model=cfg.model,
            api_key=cfg.gemini_api_key,
            api_version=cfg.gemini_api_version,
        )

    if cfg.provider == "openai":
        return OpenAIProvider(
            model=cfg.model,
            api_key=cfg.openai_api_key,
            base_url=cfg.openai_base_url,
        )

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
