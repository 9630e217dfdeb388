"""Logfire setup for the Inkwell API.

Spans follow ``<service>.<operation>`` naming (``reply_ledger.add_reply``,
``payment_service.confirm_payment``). Request headers are never captured
wholesale: the ``auth_token`` cookie and the gateway's form posts carry
credentials, so only an allow-list of headers reaches span attributes.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from inkwell.config import API_VERSION, Settings

SERVICE_NAME = "inkwell-api"

# Request headers copied onto the FastAPI request span
CAPTURED_HEADERS = ("user-agent", "content-type", "x-request-id")

# Field names scrubbed on top of Logfire's defaults: SSLCommerz store
# credentials, callback validation ids and the session issuer key
SCRUB_PATTERNS = ["store_passwd", "store_password", "val_id", "issuer_key"]


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for this process.

    Telemetry goes to Logfire cloud when OBSERVABILITY__SEND_TO_LOGFIRE is
    true, or when it is unset and OBSERVABILITY__LOGFIRE_TOKEN is present.
    Otherwise spans are only printed to the console.
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        send_to_logfire = observability.send_to_logfire
    else:
        send_to_logfire = bool(observability.logfire_token)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=API_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        version=API_VERSION,
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def request_span_attributes(request, attributes: dict) -> dict:
    """Attributes for the FastAPI request span.

    Adds method, path and client host, plus the allow-listed headers that
    are present on the request.
    """
    result = {**attributes}
    if hasattr(request, "method"):
        result["method"] = request.method
    if hasattr(request, "url"):
        result["path"] = request.url.path
    if getattr(request, "client", None):
        result["client_host"] = request.client.host

    headers = getattr(request, "headers", None) or {}
    for name in CAPTURED_HEADERS:
        value = headers.get(name)
        if value is not None:
            result[f"http.request.header.{name}"] = value
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request, including gateway callbacks."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=request_span_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace comment and transaction queries on the async engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound SSLCommerz session and validation calls."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
