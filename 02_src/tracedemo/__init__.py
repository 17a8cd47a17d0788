"""Trace demo service."""

from .app import Application, IApplication
from .config import Settings
from .downstream import DownstreamError, IPingClient, PingClient
from .tracing import TracingHandle, init_tracing

__all__ = [
    # Application
    "Application",
    "IApplication",
    "Settings",
    # Components
    "DownstreamError",
    "IPingClient",
    "PingClient",
    "TracingHandle",
    "init_tracing",
]
