"""Logfire setup and instrumentation.

Application code calls ``logfire`` directly:

    with logfire.span("cast_vote", voter=str(voter_ref), voteable=str(ref)):
        ...
    logfire.warn("Duplicate vote attempt", voter=str(voter_ref))

This module only decides where telemetry goes and hooks the FastAPI app and
the SQLAlchemy engine into it.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from voteable.config import ObservabilitySettings, Settings
from voteable.util.error import ConfigurationError

SERVICE_NAME = "voteable"
SERVICE_VERSION = "0.1.0"


def resolve_send_to_logfire(settings: ObservabilitySettings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit ``send_to_logfire`` wins; otherwise a configured token turns
    sending on.

    Raises:
        ConfigurationError: If sending is forced on without a token
    """
    if settings.send_to_logfire is None:
        return bool(settings.logfire_token)
    if settings.send_to_logfire and not settings.logfire_token:
        raise ConfigurationError(
            "OBSERVABILITY__SEND_TO_LOGFIRE is set but no Logfire token is configured"
        )
    return settings.send_to_logfire


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Console output is always on. Spans are shipped to Logfire only when
    :func:`resolve_send_to_logfire` says so.
    """
    send_to_logfire = resolve_send_to_logfire(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    # WebSocket requests have no method
    mapped = {**attributes}
    if hasattr(request, "method"):
        mapped["method"] = request.method
    if hasattr(request, "url"):
        mapped["path"] = request.url.path
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``, including the vote routes."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, so vote transactions show their row locks and
    counter updates under the request span.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Tag statements with the active span
    )
    logfire.info("SQLAlchemy instrumented")
