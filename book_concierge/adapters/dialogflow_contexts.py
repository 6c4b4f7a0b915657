"""Context store adapter backed by the contexts carried in a Dialogflow payload.

Dialogflow owns context storage and expiry. Each webhook call receives the
active contexts in ``queryResult.outputContexts`` and returns whatever contexts
it wants to upsert in the response's ``outputContexts``. This adapter exposes
that round trip as a :class:`~book_concierge.core.ports.ContextStorePort`.
"""

from __future__ import annotations

from typing import Iterable

from book_concierge.core.api_models import DialogflowContext
from book_concierge.core.models import Context

CONTEXT_PATH_SEGMENT = "/contexts/"


def short_context_name(name: str) -> str:
    """Strip the ``projects/.../contexts/`` prefix from a context name."""
    return name.rsplit("/", 1)[-1]


class DialogflowContextStore:
    """Per-request view over inbound contexts plus the writes made this turn.

    Reads see writes made earlier in the same turn, matching how the
    platform's own fulfillment libraries behave. Writes are last-write-wins by
    context name.
    """

    def __init__(self, session: str, inbound: Iterable[DialogflowContext] = ()) -> None:
        self._session = session.rstrip("/")
        self._inbound: dict[str, Context] = {}
        for wire in inbound:
            short = short_context_name(wire.name)
            self._inbound[short] = Context(
                name=short, lifespan=wire.lifespan_count, parameters=dict(wire.parameters)
            )
        self._outbound: dict[str, Context] = {}

    @property
    def session(self) -> str:
        """The Dialogflow session path this store was built for."""
        return self._session

    def get(self, name: str) -> Context | None:
        if name in self._outbound:
            return self._outbound[name]
        return self._inbound.get(name)

    def set(self, context: Context) -> None:
        self._outbound[context.name] = context

    def written(self) -> list[Context]:
        """Contexts written during this turn, in first-write order."""
        return list(self._outbound.values())

    def full_name(self, name: str) -> str:
        """Return the fully qualified context path for ``name``."""
        return f"{self._session}{CONTEXT_PATH_SEGMENT}{name}"

    def to_wire(self) -> list[DialogflowContext]:
        """Render this turn's writes as response ``outputContexts``."""
        return [
            DialogflowContext(
                name=self.full_name(ctx.name),
                lifespan_count=ctx.lifespan,
                parameters=dict(ctx.parameters),
            )
            for ctx in self._outbound.values()
        ]


__all__ = ["DialogflowContextStore", "short_context_name"]
