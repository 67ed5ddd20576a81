"""
tests.test_generation

HTTP generation clients against `httpx.MockTransport`.
"""

from __future__ import annotations

import json

import httpx
import pytest

from onedata.generation.base import GenerationError
from onedata.generation.factory import build_generator
from onedata.generation.gemini import GeminiGenerator
from onedata.generation.openai_compat import OpenAICompatGenerator
from onedata.settings import Settings


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://llm.test")


@pytest.mark.asyncio
async def test_gemini_joins_candidate_parts() -> None:
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["key"] = request.headers.get("x-goog-api-key")
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={"candidates": [{"content": {"parts": [{"text": "SELECT a"}, {"text": " FROM t"}]}}]},
        )

    async with _client(handler) as http:
        text = await GeminiGenerator(http=http, api_key="k-123").generate(
            model="gemini-2.5-flash", prompt="convert this"
        )

    assert text == "SELECT a FROM t"
    assert seen["path"] == "/v1beta/models/gemini-2.5-flash:generateContent"
    assert seen["key"] == "k-123"
    assert seen["body"]["contents"][0]["parts"][0]["text"] == "convert this"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(503, json={"error": {"message": "overloaded"}}),
        httpx.Response(200, json={"candidates": []}),
        httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": ""}]}}]}),
        httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": None}]}}]}),
        httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": 7}]}}]}),
        httpx.Response(200, content=b"not json"),
    ],
)
async def test_gemini_unusable_responses_raise(response: httpx.Response) -> None:
    async with _client(lambda request: response) as http:
        with pytest.raises(GenerationError):
            await GeminiGenerator(http=http, api_key="k").generate(model="m", prompt="p")


@pytest.mark.asyncio
async def test_openai_compat_reads_message_content() -> None:
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["auth"] = request.headers.get("authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": "SELECT 2"}}]})

    async with _client(handler) as http:
        text = await OpenAICompatGenerator(http=http, api_key="sk-x").generate(
            model="llama3", prompt="convert"
        )

    assert text == "SELECT 2"
    assert seen["path"] == "/chat/completions"
    assert seen["auth"] == "Bearer sk-x"
    assert seen["body"] == {"model": "llama3", "messages": [{"role": "user", "content": "convert"}]}


@pytest.mark.asyncio
async def test_openai_compat_without_key_sends_no_auth_header() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert "authorization" not in request.headers
        return httpx.Response(200, json={"choices": [{"message": {"content": None}}]})

    async with _client(handler) as http:
        with pytest.raises(GenerationError):
            await OpenAICompatGenerator(http=http).generate(model="m", prompt="p")


@pytest.mark.asyncio
async def test_transport_error_raises_generation_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    async with _client(handler) as http:
        with pytest.raises(GenerationError):
            await OpenAICompatGenerator(http=http).generate(model="m", prompt="p")


@pytest.mark.asyncio
async def test_factory_selects_provider() -> None:
    async with httpx.AsyncClient() as http:
        assert isinstance(build_generator(Settings(), http), GeminiGenerator)
        assert isinstance(
            build_generator(Settings(generation_provider="openai"), http), OpenAICompatGenerator
        )


def test_api_key_accepted_by_field_name() -> None:
    settings = Settings(generation_api_key="abc")
    assert settings.generation_api_key == "abc"
    assert "abc" not in repr(settings)
