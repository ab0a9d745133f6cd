"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from devflow.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build production container (PostgreSQL persistence).

    Settings are loaded from environment variables automatically.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the Request to REQUEST-scoped factories
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to a FastAPI application.

    Routes resolve ``FromDishka[...]`` parameters from it through
    ``DishkaRoute``.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
