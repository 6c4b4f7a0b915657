"""Unit tests for the intent router."""

from __future__ import annotations

import pytest

from book_concierge.core.intents import IntentType
from book_concierge.services import ServiceContainer, build_default_services
from book_concierge.services.intent_router import (
    IntentHandlerNotFoundError,
    IntentRequest,
    IntentResponse,
    IntentRouter,
)


def echo_handler(request: IntentRequest, services: ServiceContainer) -> IntentResponse:
    """Simple echo handler used for router tests."""

    _ = services
    genre = request.slot("genre")
    return IntentResponse(intent=request.intent).add(f"You asked for {genre or 'anything'}")


def test_dispatch_invokes_registered_handler(make_request):
    """Router calls the registered handler and returns its response."""
    router = IntentRouter({IntentType.TOP_RATED_BOOKS: echo_handler})
    container = ServiceContainer(intent_router=router)
    request = make_request(IntentType.TOP_RATED_BOOKS, {"genre": "fantasy"})

    response = router.dispatch(request, container)

    assert isinstance(response, IntentResponse)
    assert response.intent is IntentType.TOP_RATED_BOOKS
    assert response.texts == ["You asked for fantasy"]


def test_dispatch_unknown_intent_raises(make_request):
    """Router raises when no handler matches the requested intent."""
    router = IntentRouter()
    container = ServiceContainer(intent_router=router)
    request = make_request(IntentType.BOOK_INFORMATION)

    with pytest.raises(IntentHandlerNotFoundError):
        router.dispatch(request, container)


def test_register_and_unregister(make_request):
    """Handlers can be added and removed after construction."""
    router = IntentRouter()
    router.register(IntentType.LENGTH_INPUT, echo_handler)
    assert IntentType.LENGTH_INPUT in router.handlers()

    router.unregister(IntentType.LENGTH_INPUT)
    router.unregister(IntentType.LENGTH_INPUT)  # no-op when already absent
    with pytest.raises(IntentHandlerNotFoundError):
        router.dispatch(make_request(IntentType.LENGTH_INPUT), ServiceContainer(intent_router=router))


def test_build_default_services_registers_every_intent():
    """Default container wires exactly one distinct handler per intent."""
    services = build_default_services()

    assert services.intent_router is not None
    assert services.catalog is not None
    registered = services.intent_router.handlers()
    assert set(registered) == set(IntentType)
    handlers = list(registered.values())
    assert len(set(handlers)) == len(handlers)


def test_slot_treats_empty_values_as_missing(make_request):
    """Dialogflow's empty strings and lists never count as filled slots."""
    request = make_request(
        IntentType.GENRE_BASED_RECOMMENDATION,
        {"genre": "", "reading_level": [], "author": ["", "Tolkien"], "length": "  "},
    )

    assert request.slot("genre") is None
    assert request.slot("reading_level") is None
    assert request.slot("length") is None
    assert request.slot("author") == "Tolkien"
    assert request.slot("missing") is None


def test_response_helpers_keep_fragment_order():
    """Text and suggestion fragments are kept in the order they were added."""
    response = IntentResponse(intent=IntentType.MULTI_CRITERIA_RECOMMENDATION)
    response.add("first").suggest("A", "B").add("second")

    assert response.texts == ["first", "second"]
    assert response.suggestions == ["A", "B"]
    assert len(response.fragments) == 4
