"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..app import Application
from ..tracing import instrument_app
from .routes import greeting


def create_fastapi_app(application: Application) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan."""
        await application.start()
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="Trace Demo API",
        description="Greets with a message fetched from the ping service",
        version="0.1.0",
        lifespan=lifespan,
    )
    fastapi_app.include_router(greeting.create_greeting_router(application))

    if application.tracing:
        instrument_app(fastapi_app, application.tracing)

    return fastapi_app
