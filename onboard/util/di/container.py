"""Container construction and FastAPI wiring."""

from contextlib import asynccontextmanager
from typing import Iterable

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from onboard.util.di import Component, select_providers


def create_container(mocked: Iterable[Component] = ()) -> AsyncContainer:
    """Build the container; production implementations unless mocked.

    Args:
        mocked: Components to replace with mocks (tests only)
    """
    return make_async_container(*select_providers(mocked), FastapiProvider())


@asynccontextmanager
async def container_lifespan(app: FastAPI):
    """Close the container, and with it the engine and key cache, on shutdown."""
    yield
    await app.state.dishka_container.close()


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app; request scopes open per request."""
    setup_dishka(container, app)
