"""Main entry point for the trace demo service."""

import uvicorn
from dotenv import load_dotenv

from tracedemo.api import create_fastapi_app
from tracedemo.app import Application
from tracedemo.config import DEFAULT_ENV_PATH, Settings
from tracedemo.logging_config import get_logger, setup_logging
from tracedemo.tracing import init_tracing

logger = get_logger(__name__)


def main():
    """Run the application."""
    load_dotenv(DEFAULT_ENV_PATH)
    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)

    # Tracing must be live before the server accepts connections
    tracing = init_tracing(settings)
    try:
        application = Application(settings=settings, tracing=tracing)
        app = create_fastapi_app(application)

        logger.info("Example app listening on port %s", settings.api_port)
        uvicorn.run(
            app,
            host=settings.api_host,
            port=settings.api_port,
            log_config=None,
        )
    finally:
        tracing.shutdown()


if __name__ == "__main__":
    main()
