"""Pytest configuration and fixtures."""

import socket
import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(autouse=True)
def reset_tracing_guard():
    """Release the once-per-process tracing guard between tests."""
    from tracedemo.tracing import bootstrap

    yield
    if bootstrap._handle is not None:
        bootstrap._handle.shutdown()
    bootstrap._handle = None


@pytest.fixture
def downstream_url():
    """URL of the fake downstream service."""
    return "http://downstream.test/ping"


@pytest.fixture
def json_downstream():
    """Build a fake downstream answering every request with a JSON payload."""

    def _make(payload, status_code: int = 200) -> httpx.MockTransport:
        return httpx.MockTransport(lambda request: httpx.Response(status_code, json=payload))

    return _make


@pytest.fixture
def unused_port():
    """A local TCP port nothing is listening on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def settings(downstream_url):
    """Settings with synchronous span export and a fake downstream URL."""
    from tracedemo.config import Settings

    return Settings(
        downstream_url=downstream_url,
        service_name="TestDemoService",
        trace_span_processor="simple",
    )


@pytest.fixture
def span_exporter():
    """Collect finished spans in memory."""
    return InMemorySpanExporter()


@pytest.fixture
def tracing(settings, span_exporter):
    """Create a tracing handle exporting into span_exporter."""
    from tracedemo.tracing import init_tracing

    handle = init_tracing(settings, exporter=span_exporter, register_global=False)
    yield handle
    handle.shutdown()


@pytest_asyncio.fixture
async def client_factory(settings):
    """
    Build in-process HTTP clients for the demo API.

    Call with the fake downstream transport and optionally a tracing handle.
    Every application and client built is closed on teardown.
    """
    from tracedemo.api import create_fastapi_app
    from tracedemo.app import Application

    applications = []
    clients = []

    async def _make(transport: httpx.AsyncBaseTransport, tracing=None) -> httpx.AsyncClient:
        application = Application(settings=settings, tracing=tracing, transport=transport)
        # ASGITransport does not run the lifespan, so start explicitly
        await application.start()
        applications.append(application)

        client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=create_fastapi_app(application)),
            base_url="http://testserver",
        )
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()
    for application in applications:
        await application.stop()
