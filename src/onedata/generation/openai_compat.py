"""
onedata.generation.openai_compat

Client for OpenAI-compatible `/chat/completions` endpoints.

Responsibilities:
- Talk to hosted OpenAI or local servers (Ollama, vLLM, LM Studio) with one code path.
- Extract `choices[0].message.content`.
"""

from __future__ import annotations

from typing import Any

import httpx

from onedata.generation.base import GenerationError


class OpenAICompatGenerator:
    def __init__(self, *, http: httpx.AsyncClient, api_key: str = "") -> None:
        self._http = http
        self._api_key = api_key

    async def generate(self, *, model: str, prompt: str) -> str:
        headers = {"Authorization": f"Bearer {self._api_key}"} if self._api_key else {}
        try:
            r = await self._http.post(
                "/chat/completions",
                headers=headers,
                json={"model": model, "messages": [{"role": "user", "content": prompt}]},
            )
            r.raise_for_status()
            payload: Any = r.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise GenerationError(f"chat completion request failed: {exc}") from exc

        try:
            text = payload["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise GenerationError("chat completion response has no message content") from exc
        if not isinstance(text, str) or not text.strip():
            raise GenerationError("chat completion returned an empty response")
        return text
