"""Logfire setup and library instrumentation.

Services and repositories call ``logfire`` directly:

    with logfire.span("vote_ledger.submit_vote", target_id=str(target_id)):
        logfire.info("Vote submitted", transition="created")

This module only configures the SDK once per process and hooks it into
FastAPI and SQLAlchemy.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from qna.config import Settings

SERVICE_NAME = "qna-api"


def _should_send(settings: Settings) -> bool:
    """Explicit setting wins, otherwise send whenever a token is configured."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure the Logfire SDK.

    Without a token events only go to the console. Set
    OBSERVABILITY__LOGFIRE_TOKEN to ship them, or force either way with
    OBSERVABILITY__SEND_TO_LOGFIRE.

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
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes: dict) -> dict:
    # WebSocket connections have no method
    result = {**attributes, "path": request.url.path}
    method = getattr(request, "method", None)
    if method:
        result["method"] = method
    if request.client:
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request and WebSocket connection handled by ``app``."""
    logfire.instrument_fastapi(
        app,
        capture_headers=True,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through ``engine``.

    Statements carry a SQL comment with the active span context so slow
    queries in Postgres logs can be matched to a trace.
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
