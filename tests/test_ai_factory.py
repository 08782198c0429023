import unittest
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

from resume_critic.ai import AIConfig, get_ai_client
from resume_critic.ai.providers import gemini_provider
from resume_critic.ai.providers.gemini_provider import GeminiProvider
from resume_critic.ai.providers.openai_provider import OpenAIProvider
from resume_critic.api.deps import ai_client_dependency


def _request():
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace()))


class GeminiProviderTests(unittest.IsolatedAsyncioTestCase):
    async def test_generate_sends_prompt_to_configured_model(self):
        with patch.object(gemini_provider.genai, "Client") as client_cls:
            generate_content = AsyncMock(return_value=SimpleNamespace(text='{"overall": "8/10"}'))
            client_cls.return_value.aio.models.generate_content = generate_content
            provider = GeminiProvider("gemini-2.5-flash", api_key=" key-123 ")
            reply = await provider.generate("Critique this resume")

        self.assertEqual(reply, '{"overall": "8/10"}')
        self.assertEqual(client_cls.call_args.kwargs["api_key"], "key-123")
        self.assertEqual(client_cls.call_args.kwargs["http_options"].api_version, "v1")
        generate_content.assert_awaited_once_with(model="gemini-2.5-flash", contents="Critique this resume")

    async def test_empty_reply_is_empty_string(self):
        with patch.object(gemini_provider.genai, "Client") as client_cls:
            client_cls.return_value.aio.models.generate_content = AsyncMock(return_value=SimpleNamespace(text=None))
            provider = GeminiProvider("gemini-2.5-flash", api_key="key-123")
            self.assertEqual(await provider.generate("prompt"), "")

    def test_missing_key(self):
        with patch.object(gemini_provider.genai, "Client") as client_cls:
            with self.assertRaises(RuntimeError) as ctx:
                GeminiProvider("gemini-2.5-flash", api_key="  ")
        self.assertIn("GEMINI_API_KEY", str(ctx.exception))
        client_cls.assert_not_called()


class FactoryTests(unittest.TestCase):
    def test_gemini_provider_selected(self):
        with patch.object(gemini_provider.genai, "Client"):
            client = get_ai_client(
                AIConfig(provider="gemini", model="gemini-2.5-flash", gemini_api_key="key", gemini_api_version="v1beta")
            )
        self.assertIsInstance(client, GeminiProvider)
        self.assertEqual(client.model, "gemini-2.5-flash")

    def test_openai_provider_selected(self):
        client = get_ai_client(AIConfig(provider="openai", model="gpt-4o-mini", openai_api_key="sk-test"))
        self.assertIsInstance(client, OpenAIProvider)
        self.assertEqual(client.model, "gpt-4o-mini")

    def test_openai_missing_key(self):
        with self.assertRaises(RuntimeError) as ctx:
            get_ai_client(AIConfig(provider="openai", model="gpt-4o-mini"))
        self.assertIn("OPENAI_API_KEY", str(ctx.exception))

    def test_unknown_provider(self):
        with self.assertRaises(ValueError) as ctx:
            get_ai_client(AIConfig(provider="claude", model="m"))
        self.assertIn("claude", str(ctx.exception))


class AIClientDependencyTests(unittest.TestCase):
    def test_client_on_app_state_is_reused(self):
        request = _request()
        request.app.state.ai_client = sentinel = object()
        with patch("resume_critic.api.deps.get_ai_client") as factory:
            self.assertIs(ai_client_dependency(request), sentinel)
        factory.assert_not_called()

    def test_built_client_is_stored(self):
        request = _request()
        sentinel = object()
        with patch("resume_critic.api.deps.get_ai_client", return_value=sentinel) as factory:
            self.assertIs(ai_client_dependency(request), sentinel)
            self.assertIs(ai_client_dependency(request), sentinel)
        factory.assert_called_once()

    def test_failed_build_is_attempted_and_logged_once(self):
        request = _request()
        with patch(
            "resume_critic.api.deps.get_ai_client", side_effect=RuntimeError("GEMINI_API_KEY is missing")
        ) as factory:
            with self.assertLogs("resume_critic.api.deps", level="WARNING") as logs:
                self.assertIsNone(ai_client_dependency(request))
                self.assertIsNone(ai_client_dependency(request))
        factory.assert_called_once()
        self.assertEqual(len(logs.output), 1)
        self.assertIn("GEMINI_API_KEY is missing", logs.output[0])
        self.assertEqual(request.app.state.ai_client_error, "GEMINI_API_KEY is missing")

    def test_error_recorded_at_startup_skips_rebuild(self):
        request = _request()
        request.app.state.ai_client = None
        request.app.state.ai_client_error = "Unsupported AI_PROVIDER='claude'"
        with patch("resume_critic.api.deps.get_ai_client") as factory:
            self.assertIsNone(ai_client_dependency(request))
        factory.assert_not_called()


if __name__ == "__main__":
    unittest.main()
