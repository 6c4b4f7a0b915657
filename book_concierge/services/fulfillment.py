"""Decode a Dialogflow webhook call, dispatch it, and encode the reply."""

from __future__ import annotations

from typing import NamedTuple

from book_concierge.adapters.dialogflow_contexts import DialogflowContextStore
from book_concierge.core.api_models import (
    QuickRepliesMessage,
    TextMessage,
    WebhookRequest,
    WebhookResponse,
)
from book_concierge.core.exceptions import MalformedWebhookRequestError
from book_concierge.core.intents import IntentType
from book_concierge.core.logging import get_logger, session_tail, turn_context
from book_concierge.core.models import Fragment, SuggestionFragment, TextFragment
from book_concierge.services import ServiceContainer
from book_concierge.services.intent_router import (
    IntentHandlerNotFoundError,
    IntentRequest,
    IntentRouter,
)

logger = get_logger(__name__)

FALLBACK_TEXT = (
    "Sorry, I can't help with that yet. I can recommend books by genre, length, author, or a "
    "book you enjoyed, and tell you about popular titles."
)


class DecodedRequest(NamedTuple):
    """Result of decoding a webhook payload."""

    display_name: str
    store: DialogflowContextStore
    request: IntentRequest | None


def decode_request(payload: WebhookRequest) -> DecodedRequest:
    """Return the intent display name, context store, and (for known intents) the request.

    Raises :class:`MalformedWebhookRequestError` when the payload carries no
    intent display name at all.
    """
    query_result = payload.query_result
    if query_result is None:
        raise MalformedWebhookRequestError("webhook request has no queryResult")
    display_name = query_result.intent.display_name if query_result.intent else None
    if not display_name:
        raise MalformedWebhookRequestError("webhook request has no intent displayName")

    store = DialogflowContextStore(payload.session, query_result.output_contexts)
    intent = IntentType.from_display_name(display_name)
    if intent is None:
        return DecodedRequest(display_name, store, None)
    request = IntentRequest(intent=intent, parameters=dict(query_result.parameters), contexts=store)
    return DecodedRequest(display_name, store, request)


def encode_response(
    fragments: list[Fragment], store: DialogflowContextStore | None
) -> WebhookResponse:
    """Build the Dialogflow response body from handler output."""
    texts = [frag.text for frag in fragments if isinstance(frag, TextFragment)]
    chips = [frag.title for frag in fragments if isinstance(frag, SuggestionFragment)]
    messages: list[TextMessage | QuickRepliesMessage] = [
        TextMessage(text={"text": [text]}) for text in texts
    ]
    if chips:
        messages.append(QuickRepliesMessage(quick_replies={"quickReplies": chips}))
    return WebhookResponse(
        fulfillment_text="\n".join(texts),
        fulfillment_messages=messages,
        output_contexts=store.to_wire() if store is not None else [],
    )


def fulfill(payload: WebhookRequest, services: ServiceContainer) -> WebhookResponse:
    """Run one webhook turn end to end."""
    router = services.intent_router
    if not isinstance(router, IntentRouter):
        raise RuntimeError("IntentRouter has not been configured.")

    display_name, store, request = decode_request(payload)
    with turn_context(session=session_tail(payload.session), intent=display_name):
        if request is None:
            logger.warning("unhandled intent %r; answering with fallback", display_name)
            return encode_response([TextFragment(FALLBACK_TEXT)], None)

        try:
            response = router.dispatch(request, services)
        except IntentHandlerNotFoundError:
            logger.warning(
                "no handler registered for intent %s; answering with fallback",
                request.intent.value,
            )
            return encode_response([TextFragment(FALLBACK_TEXT)], None)

        logger.info(
            "intent %s fulfilled",
            request.intent.value,
            extra={
                "contexts_written": [ctx.name for ctx in store.written()],
                "suggestions": response.suggestions,
            },
        )
        return encode_response(response.fragments, store)


__all__ = ["FALLBACK_TEXT", "DecodedRequest", "decode_request", "encode_response", "fulfill"]
