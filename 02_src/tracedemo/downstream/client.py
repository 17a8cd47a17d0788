"""Client for the downstream ping service."""

import json
from typing import Protocol

import httpx

from ..logging_config import get_logger

logger = get_logger(__name__)


class DownstreamError(RuntimeError):
    """The downstream call failed: unreachable, non-2xx or unusable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class IPingClient(Protocol):
    """Abstraction for the downstream ping call."""

    async def fetch_message(self) -> str:
        """Fetch the downstream `message` field."""
        ...

    async def aclose(self) -> None:
        """Release pooled connections."""
        ...


class PingClient:
    """httpx-backed client for GET <downstream>/ping."""

    def __init__(self, url: str, transport: httpx.AsyncBaseTransport | None = None):
        self._url = url
        self._client = httpx.AsyncClient(transport=transport)

    @property
    def url(self) -> str:
        return self._url

    async def fetch_message(self) -> str:
        """GET the downstream URL and return its `message` field."""
        try:
            response = await self._client.get(self._url)
        except httpx.HTTPError as e:
            raise DownstreamError(
                f"Downstream request to {self._url} failed: {type(e).__name__}: {e}"
            ) from e

        if not response.is_success:
            raise DownstreamError(
                f"Downstream request to {self._url} failed with status code "
                f"{response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DownstreamError(
                f"Downstream response from {self._url} is not valid JSON: {e}",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict) or "message" not in data:
            raise DownstreamError(
                f"Downstream response from {self._url} has no 'message' field",
                status_code=response.status_code,
            )

        logger.debug("Downstream replied with status %s", response.status_code)
        message = data["message"]
        if isinstance(message, str):
            return message
        # Non-string JSON values keep their JSON spelling (null, true, 42)
        return json.dumps(message)

    async def aclose(self) -> None:
        """Release pooled connections."""
        await self._client.aclose()
