from .config import AIConfig, load_ai_config
from .factory import get_ai_client
from .types import AIClient

__all__ = ["AIClient", "AIConfig", "get_ai_client", "load_ai_config"]
