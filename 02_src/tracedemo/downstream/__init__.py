"""Downstream module."""

from .client import DownstreamError, IPingClient, PingClient

__all__ = ["DownstreamError", "IPingClient", "PingClient"]
