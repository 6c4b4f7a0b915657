"""Intent router and supporting request/response models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Mapping, MutableMapping, Optional

from book_concierge.core.intents import IntentType
from book_concierge.core.models import Fragment, SuggestionFragment, TextFragment, normalize_slot
from book_concierge.core.ports import ContextStorePort

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from . import ServiceContainer


@dataclass(frozen=True, slots=True)
class IntentRequest:
    """Decoded webhook call: which intent fired, its slots, and the context store."""

    intent: IntentType
    parameters: Mapping[str, Optional[str]]
    contexts: ContextStorePort

    def slot(self, name: str) -> Optional[str]:
        """Return a filled slot value, treating empty values as absent."""
        return normalize_slot(self.parameters.get(name))


@dataclass(slots=True)
class IntentResponse:
    """Ordered output fragments produced by a single handler call."""

    intent: IntentType
    fragments: list[Fragment] = field(default_factory=list)

    def add(self, text: str) -> "IntentResponse":
        """Append a text block."""
        self.fragments.append(TextFragment(text))
        return self

    def suggest(self, *titles: str) -> "IntentResponse":
        """Append one suggestion chip per title."""
        self.fragments.extend(SuggestionFragment(title) for title in titles)
        return self

    @property
    def texts(self) -> list[str]:
        """Text fragments in order."""
        return [frag.text for frag in self.fragments if isinstance(frag, TextFragment)]

    @property
    def suggestions(self) -> list[str]:
        """Suggestion chip titles in order."""
        return [frag.title for frag in self.fragments if isinstance(frag, SuggestionFragment)]


IntentHandler = Callable[[IntentRequest, "ServiceContainer"], IntentResponse]


class IntentRouterError(RuntimeError):
    """Base error for router failures."""


class IntentHandlerNotFoundError(IntentRouterError):
    """Raised when no handler is registered for the requested intent."""


class IntentRouter:
    """Dispatch intents to registered handlers."""

    def __init__(self, handlers: Mapping[IntentType, IntentHandler] | None = None) -> None:
        self._handlers: MutableMapping[IntentType, IntentHandler] = dict(handlers or {})

    def register(self, intent: IntentType, handler: IntentHandler) -> None:
        """Register or replace a handler for ``intent``."""

        self._handlers[intent] = handler

    def unregister(self, intent: IntentType) -> None:
        """Remove a handler if present."""

        self._handlers.pop(intent, None)

    def dispatch(self, request: IntentRequest, services: "ServiceContainer") -> IntentResponse:
        """Invoke the handler for ``request.intent`` with the provided services."""

        try:
            handler = self._handlers[request.intent]
        except KeyError as exc:
            raise IntentHandlerNotFoundError(
                f"No handler registered for intent {request.intent.value}"
            ) from exc
        return handler(request, services)

    def handlers(self) -> Mapping[IntentType, IntentHandler]:
        """Return a shallow copy of the current intent handler registry."""

        return dict(self._handlers)


__all__ = [
    "IntentRouter",
    "IntentRouterError",
    "IntentHandlerNotFoundError",
    "IntentHandler",
    "IntentRequest",
    "IntentResponse",
]
