"""Greeting API route."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from ...app import IApplication
from ...logging_config import get_logger

logger = get_logger(__name__)

GREETING = "Hello World!"


class ErrorResponse(BaseModel):
    """Response model for a failed downstream call."""

    message: str


def create_greeting_router(app: IApplication) -> APIRouter:
    """Create greeting router."""
    router = APIRouter(tags=["greeting"])

    @router.get(
        "/test",
        response_class=PlainTextResponse,
        responses={500: {"model": ErrorResponse}},
    )
    async def greet():
        """Call the downstream service and greet with its message."""
        try:
            message = await app.ping_client.fetch_message()
            return PlainTextResponse(f"{GREETING} {message}")
        except Exception as e:
            logger.warning("Downstream call failed: %s", e)
            error = ErrorResponse(message=str(e) or type(e).__name__)
            return JSONResponse(status_code=500, content=error.model_dump())

    return router
