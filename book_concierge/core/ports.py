"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Protocol

from book_concierge.core.models import Context


class ContextStorePort(Protocol):
    """Port exposing the platform's named conversation contexts."""

    def get(self, name: str) -> Context | None:
        """Return the active context called ``name`` or ``None`` if absent."""
        ...

    def set(self, context: Context) -> None:
        """Replace (or create) the context with ``context.name``."""
        ...


__all__ = ["ContextStorePort"]
