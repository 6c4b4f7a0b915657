"""Health and readiness routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

from book_concierge import BOOK_CONCIERGE_VERSION
from book_concierge.core.config import config

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def read_root() -> str:
    """Plain-text availability message used by uptime checks."""
    return config.HEALTH_MESSAGE


@router.get("/alive")
async def alive_check() -> JSONResponse:
    """Structured health check endpoint for infrastructure probes."""
    return JSONResponse(
        {
            "status": "ok",
            "message": "Book concierge fulfillment is alive and healthy.",
            "version": BOOK_CONCIERGE_VERSION,
        }
    )


__all__ = ["router"]
