"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Question created", question_id=str(question.id))

    # Manual spans for critical operations
    with logfire.span("vote_service.vote", votable_id=str(votable_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from devflow.config import Settings
from devflow.util.error import ConfigurationError


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    - Development: local console only unless a token is provided
    - Production: sends to Logfire cloud when a token is provided

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN to enable cloud sending
    - OBSERVABILITY__SEND_TO_LOGFIRE overrides the token-based default

    Args:
        settings: Application settings

    Raises:
        ConfigurationError: If production is started with the default JWT secret
    """
    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == "CHANGE_ME_IN_PRODUCTION"
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")

    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "devflow-api",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Traces every request with its duration, status and errors.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        """Add method, path and client host to the request span."""
        result = {**attributes}

        if hasattr(request, "method"):
            result["method"] = request.method

        if hasattr(request, "url"):
            result["path"] = request.url.path

        if hasattr(request, "client") and request.client:
            result["client_host"] = request.client.host

        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Traces all SQL queries, their duration and transaction boundaries.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")
