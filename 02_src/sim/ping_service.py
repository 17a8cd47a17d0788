"""Ping simulator: local stand-in for the downstream service."""

from dataclasses import replace

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from pydantic import BaseModel

from tracedemo.config import DEFAULT_ENV_PATH, Settings
from tracedemo.logging_config import get_logger, setup_logging
from tracedemo.tracing import TracingHandle, init_tracing, instrument_app

logger = get_logger(__name__)


class PingResponse(BaseModel):
    """Response model for ping."""

    message: str


def create_ping_app(message: str = "pong", tracing: TracingHandle | None = None) -> FastAPI:
    """Create the ping app answering GET /ping with a fixed message."""
    app = FastAPI(title="Ping Simulator", version="0.1.0")

    @app.get("/ping", response_model=PingResponse)
    async def ping() -> dict:
        """Reply with the configured message."""
        return {"message": message}

    if tracing:
        instrument_app(app, tracing)

    return app


def main():
    """Run the ping simulator."""
    load_dotenv(DEFAULT_ENV_PATH)
    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)

    tracing = init_tracing(replace(settings, service_name=settings.ping_service_name))
    try:
        app = create_ping_app(settings.ping_message, tracing)
        logger.info("Ping simulator listening on port %s", settings.ping_port)
        uvicorn.run(
            app,
            host=settings.ping_host,
            port=settings.ping_port,
            log_config=None,
        )
    finally:
        tracing.shutdown()


if __name__ == "__main__":
    main()
