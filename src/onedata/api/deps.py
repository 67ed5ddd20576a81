"""
onedata.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Expose the ObjectStore and generator created at startup (stored on app.state).
- Build request-scoped service objects.
"""

from __future__ import annotations

from fastapi import Depends, Request

from onedata.db.store import ObjectStore
from onedata.generation.base import TextGenerator
from onedata.services.conversion_service import ConversionService
from onedata.services.deployment_service import DeploymentService
from onedata.services.graph_service import GraphQueryService
from onedata.settings import Settings


def settings_dep(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[attr-defined]


def store_dep(request: Request) -> ObjectStore:
    # The store is opened in the app lifespan (see `onedata.api.app.create_app`).
    return request.app.state.store  # type: ignore[attr-defined]


def generator_dep(request: Request) -> TextGenerator:
    return request.app.state.generator  # type: ignore[attr-defined]


def graph_service(store: ObjectStore = Depends(store_dep)) -> GraphQueryService:
    return GraphQueryService(store=store)


def conversion_service(
    store: ObjectStore = Depends(store_dep),
    generator: TextGenerator = Depends(generator_dep),
    settings: Settings = Depends(settings_dep),
) -> ConversionService:
    return ConversionService(store=store, generator=generator, settings=settings)


def deployment_service(
    store: ObjectStore = Depends(store_dep),
    settings: Settings = Depends(settings_dep),
) -> DeploymentService:
    return DeploymentService(store=store, target=settings.deploy_target)
