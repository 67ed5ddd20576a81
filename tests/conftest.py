"""
tests.conftest

Shared fixtures: a temporary SQLite store, a scripted generator and an in-process API client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

from onedata.api.app import create_app
from onedata.db.store import ObjectStore
from onedata.settings import Settings


class FakeGenerator:
    """Returns a fixed reply (or raises) and records every prompt it receives."""

    def __init__(self, reply: str = "SELECT 1", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def generate(self, *, model: str, prompt: str) -> str:
        self.calls.append((model, prompt))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'onedata-test.db'}"


@pytest.fixture
def settings(database_url: str) -> Settings:
    return Settings(env="test", database_url=database_url, generation_timeout_s=1.0)


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest_asyncio.fixture
async def store(database_url: str) -> AsyncIterator[ObjectStore]:
    async with ObjectStore(database_url=database_url) as s:
        yield s


@pytest_asyncio.fixture
async def client(settings: Settings, generator: FakeGenerator) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings, generator=generator)

    # httpx ASGITransport does not run the lifespan; enter it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
            yield http
