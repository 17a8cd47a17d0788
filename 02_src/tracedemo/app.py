"""Application bootstrap and lifecycle management."""

from typing import Protocol

import httpx

from .config import Settings
from .downstream import IPingClient, PingClient
from .logging_config import get_logger
from .tracing import TracingHandle, traced_transport

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components."""
        ...

    async def stop(self) -> None:
        """Release components."""
        ...

    @property
    def ping_client(self) -> IPingClient:
        """Client for the downstream service."""
        ...


class Application:
    """Holds the settings, tracing handle and downstream client of one server."""

    def __init__(
        self,
        settings: Settings | None = None,
        tracing: TracingHandle | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings or Settings()
        self._tracing = tracing
        self._transport = transport

        # Created in start()
        self._ping_client: PingClient | None = None

    async def start(self) -> None:
        """Create the downstream client. No-op when already started."""
        if self._ping_client:
            return

        logger.info("Starting application")
        self._ping_client = PingClient(
            self._settings.downstream_url,
            transport=traced_transport(self._tracing, self._transport),
        )
        logger.info("Downstream client ready for %s", self._settings.downstream_url)

    async def stop(self) -> None:
        """Close the downstream client."""
        if self._ping_client:
            await self._ping_client.aclose()
            self._ping_client = None
            logger.info("Downstream client closed")

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def tracing(self) -> TracingHandle | None:
        return self._tracing

    @property
    def ping_client(self) -> IPingClient:
        """Get downstream client instance."""
        if not self._ping_client:
            raise RuntimeError("Application not started")
        return self._ping_client
