"""Tracing module."""

from .bootstrap import TracingHandle, get_tracing, init_tracing
from .instrumentation import instrument_app, traced_transport

__all__ = [
    "TracingHandle",
    "get_tracing",
    "init_tracing",
    "instrument_app",
    "traced_transport",
]
