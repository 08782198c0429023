from __future__ import annotations

from google import genai
from google.genai import types


class GeminiProvider:
    def __init__(self, model: str, api_key: str | None = None, api_version: str = "v1"):
        key = (api_key or "").strip()
        if not key:
            raise RuntimeError("GEMINI_API_KEY is missing")

        self._model = model
        self._client = genai.Client(
            api_key=key,
            http_options=types.HttpOptions(api_version=api_version),
        )

    @property
    def model(self) -> str:
        return self._model

    async def generate(self, prompt: str) -> str:
        response = await self._client.aio.models.generate_content(
            model=self._model,
            contents=prompt,
        )
        return response.text or ""
