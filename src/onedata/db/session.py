"""
onedata.db.session

Async SQLAlchemy engine + session factory helpers.

Responsibilities:
- Create the async engine from a database url.
- Create the async sessionmaker with safe defaults.
- Create tables on first open.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from onedata.db import models  # noqa: F401  # ensure models are registered on Base.metadata
from onedata.db.base import Base


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False keeps returned rows readable after the session closes.
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    # CREATE TABLE IF NOT EXISTS semantics; existing rows are untouched.
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
