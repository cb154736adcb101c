"""Logfire setup and instrumentation.

Invitation URLs and forms carry bearer tokens and passwords. Request spans
have their query strings stripped as they start, and form values and headers
are never captured. Code that needs to identify a token logs only its first
eight characters.
"""

from collections.abc import Sequence

import logfire
from fastapi import FastAPI
from opentelemetry.context import Context
from opentelemetry.sdk.trace import Span, SpanProcessor
from sqlalchemy.ext.asyncio import AsyncEngine

from onboard.config import Settings

SERVICE_NAME = "onboard"

# Request URL attributes set by the ASGI and httpx instrumentations
_URL_ATTRIBUTES = ("http.url", "url.full", "http.target")


class QueryRedactingProcessor(SpanProcessor):
    """Strip query strings from request URLs before any exporter sees them.

    ``GET /invitation?token=...`` puts the bearer token in the URL. The
    instrumentation records URL attributes when the span starts, so they are
    rewritten here, before exporters and Logfire's message formatting read
    them at span end.
    """

    def on_start(self, span: Span, parent_context: Context | None = None) -> None:
        attributes = span.attributes or {}
        for key in _URL_ATTRIBUTES:
            value = attributes.get(key)
            if isinstance(value, str) and "?" in value:
                span.set_attribute(key, value.split("?", 1)[0])
        if attributes.get("url.query"):
            span.set_attribute("url.query", "[redacted]")


def _should_send(settings: Settings) -> bool:
    """Explicit OBSERVABILITY__SEND_TO_LOGFIRE wins, else send iff a token exists."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(
    settings: Settings, extra_processors: Sequence[SpanProcessor] = ()
) -> None:
    """Configure Logfire once per process, before the app is created.

    Args:
        settings: Application settings
        extra_processors: Span processors run after query redaction
    """
    send = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
            min_log_level="debug" if settings.debug else "info",
        ),
        additional_span_processors=[QueryRedactingProcessor(), *extra_processors],
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    # "values" holds the parsed token and password fields
    scrubbed = {k: v for k, v in attributes.items() if k != "values"}
    scrubbed["method"] = request.method
    scrubbed["path"] = request.url.path
    return scrubbed


def instrument_fastapi(app: FastAPI) -> None:
    """Trace requests without capturing headers or parsed arguments."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace account store queries."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace JWKS downloads from the issuer."""
    logfire.instrument_httpx()
