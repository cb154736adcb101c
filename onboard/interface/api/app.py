"""FastAPI application factory.

Run with ``uvicorn --factory onboard.interface.api.app:create_app`` after
configuring Logfire (scripts/start_app.py does both).
"""

from dishka import AsyncContainer
from fastapi import FastAPI

from onboard.interface.api.error_handlers import register_error_handlers
from onboard.interface.api.routes import health, invitation
from onboard.util.di.container import container_lifespan, create_container, setup_di
from onboard.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the application.

    Args:
        container: DI container; the production container when omitted
    """
    instrument_httpx()

    app = FastAPI(
        title="Onboard",
        description="Accept an invitation: verify the email, set a first password",
        version="0.1.0",
        lifespan=container_lifespan,
    )
    instrument_fastapi(app)

    setup_di(app, container or create_container())

    app.include_router(health.router)
    app.include_router(invitation.router)
    register_error_handlers(app)

    return app
