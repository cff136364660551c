"""Observability configuration using Logfire.

Logfire provides structured logging and tracing on top of OpenTelemetry,
with integrations for FastAPI and SQLAlchemy.

Usage:
    import logfire

    # Structured logging
    logfire.info("Comment created", comment_id=str(comment.id), level=comment.level)

    # Manual spans for service operations
    with logfire.span("thread_service.assemble_thread", target=str(target)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from knowspace.config import Settings

SERVICE_NAME = "knowspace-api"

# Request parameters that carry session tokens
CREDENTIAL_PARAMS = frozenset({"authorization", "auth_token"})


def _should_send(settings: Settings) -> bool:
    """An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise send iff a token is set."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Console output is always on; spans go to Logfire cloud only when
    ``_should_send`` says so.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        scrubbing=logfire.ScrubbingOptions(extra_patterns=list(CREDENTIAL_PARAMS)),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes: dict) -> dict:
    """Keep validated route values on the request span, minus credentials."""
    values = {
        name: value
        for name, value in attributes.get("values", {}).items()
        if name not in CREDENTIAL_PARAMS
    }
    result = {**attributes, "values": values}
    if attributes.get("errors"):
        result["validation_error_count"] = len(attributes["errors"])
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request with its duration, status and route values.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
