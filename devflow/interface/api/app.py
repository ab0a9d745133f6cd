"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from devflow.config import Settings
from devflow.interface.api.routes import (
    answers,
    health,
    questions,
    tags,
    users,
)
from devflow.util.di.container import create_container, setup_di
from devflow.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.

    Args:
        container: DI container to use; the production container when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="DevFlow API",
        description="Backend API for DevFlow - a community Q&A forum for developers",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Cookies carry the session, so origins must be explicit
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
            "X-Webhook-Secret",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(users.router)
    app_instance.include_router(tags.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
