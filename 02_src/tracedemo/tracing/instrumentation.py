"""Explicit instrumentation hooks for the server and the outbound client."""

import httpx
from fastapi import FastAPI
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import AsyncOpenTelemetryTransport

from .bootstrap import TracingHandle


def instrument_app(app: FastAPI, tracing: TracingHandle) -> FastAPI:
    """Attach server-span middleware to this one app."""
    FastAPIInstrumentor.instrument_app(app, tracer_provider=tracing.provider)
    return app


def traced_transport(
    tracing: TracingHandle | None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncBaseTransport | None:
    """
    Wrap an httpx transport so each outbound request gets a client span.

    The wrapper also injects the current trace context into request headers.
    Without a tracing handle the transport is returned untouched, including
    None, so httpx.AsyncClient keeps building its own environment-aware
    transport.
    """
    if tracing is None:
        return transport
    inner = transport if transport is not None else httpx.AsyncHTTPTransport()
    return AsyncOpenTelemetryTransport(inner, tracer_provider=tracing.provider)
