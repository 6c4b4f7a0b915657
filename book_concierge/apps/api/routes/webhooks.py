"""Dialogflow fulfillment webhook route."""

from __future__ import annotations

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from book_concierge.core.api_models import WebhookRequest
from book_concierge.core.exceptions import MalformedWebhookRequestError
from book_concierge.core.logging import get_logger
from book_concierge.services import ServiceContainer
from book_concierge.services.fulfillment import fulfill

router = APIRouter()
logger = get_logger(__name__)


def _get_services(request: Request) -> ServiceContainer:
    services = getattr(request.app.state, "services", None)
    if not isinstance(services, ServiceContainer):
        raise RuntimeError("Service container is not configured on app.state.")
    return services


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@router.post("/webhook")
async def handle_dialogflow_webhook(request: Request) -> JSONResponse:
    """Fulfill one Dialogflow turn and return the platform's response body."""
    services = _get_services(request)
    try:
        body = await request.json()
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError both land here
        logger.error("Invalid JSON received", exc_info=True)
        return _bad_request("Invalid JSON")
    logger.debug("dialogflow request body", extra={"body": body})

    try:
        payload = WebhookRequest.model_validate(body)
        response = fulfill(payload, services)
    except ValidationError as exc:
        logger.warning("webhook payload failed validation: %s", exc.errors())
        return _bad_request("Malformed webhook request")
    except MalformedWebhookRequestError as exc:
        logger.warning("rejecting webhook request: %s", exc)
        return _bad_request(str(exc))

    return JSONResponse(content=response.to_wire())


__all__ = ["router"]
