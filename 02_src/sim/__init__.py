"""Ping simulator module."""

from .ping_service import create_ping_app

__all__ = ["create_ping_app"]
