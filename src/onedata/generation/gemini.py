"""
onedata.generation.gemini

Google Gemini `generateContent` client over plain HTTP.

Responsibilities:
- POST a single-turn prompt to `/v1beta/models/{model}:generateContent`.
- Extract the concatenated text of the first candidate.
"""

from __future__ import annotations

from typing import Any

import httpx

from onedata.generation.base import GenerationError


class GeminiGenerator:
    def __init__(self, *, http: httpx.AsyncClient, api_key: str) -> None:
        self._http = http
        self._api_key = api_key

    async def generate(self, *, model: str, prompt: str) -> str:
        try:
            r = await self._http.post(
                f"/v1beta/models/{model}:generateContent",
                headers={"x-goog-api-key": self._api_key},
                json={"contents": [{"role": "user", "parts": [{"text": prompt}]}]},
            )
            r.raise_for_status()
            payload = r.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise GenerationError(f"gemini request failed: {exc}") from exc
        return _candidate_text(payload)


def _candidate_text(payload: Any) -> str:
    try:
        parts = payload["candidates"][0]["content"]["parts"]
        texts = [p.get("text") or "" for p in parts]
    except (KeyError, IndexError, TypeError, AttributeError) as exc:
        raise GenerationError("gemini response has no candidate text") from exc
    if not all(isinstance(t, str) for t in texts):
        raise GenerationError("gemini response has a non-text part")
    text = "".join(texts)
    if not text.strip():
        raise GenerationError("gemini returned an empty response")
    return text
