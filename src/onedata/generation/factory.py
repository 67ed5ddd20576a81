"""
onedata.generation.factory

Builds the configured generator and its shared HTTP client.
"""

from __future__ import annotations

import httpx

from onedata.generation.base import TextGenerator
from onedata.generation.gemini import GeminiGenerator
from onedata.generation.openai_compat import OpenAICompatGenerator
from onedata.settings import Settings


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    # One pooled client per process; closed on app shutdown.
    return httpx.AsyncClient(
        base_url=settings.generation_base_url.rstrip("/"),
        timeout=httpx.Timeout(settings.generation_timeout_s),
    )


def build_generator(settings: Settings, http: httpx.AsyncClient) -> TextGenerator:
    if settings.generation_provider == "openai":
        return OpenAICompatGenerator(http=http, api_key=settings.generation_api_key)
    return GeminiGenerator(http=http, api_key=settings.generation_api_key)
