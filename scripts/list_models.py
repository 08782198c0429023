from __future__ import annotations

import argparse

from google import genai
from google.genai import types

from resume_critic.core.config import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="List the Gemini models available to the configured API key.")
    parser.add_argument("--api-key", default=settings.gemini_api_key, help="Gemini API key (default: GEMINI_API_KEY).")
    parser.add_argument("--api-version", default=settings.gemini_api_version, help="Gemini API version.")
    parser.add_argument(
        "--generate-only",
        action="store_true",
        help="Only list models that support generateContent.",
    )
    args = parser.parse_args()

    if not args.api_key:
        parser.error("GEMINI_API_KEY is not set; pass --api-key.")

    client = genai.Client(api_key=args.api_key, http_options=types.HttpOptions(api_version=args.api_version))
    for model in client.models.list():
        actions = model.supported_actions or []
        if args.generate_only and "generateContent" not in actions:
            continue
        print(model.name)


if __name__ == "__main__":
    main()
