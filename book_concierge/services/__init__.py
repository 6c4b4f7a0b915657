"""Application service layer scaffolding for intent handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .catalog import Catalog
    from .intent_router import IntentRouter


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to handlers."""

    catalog: Optional["Catalog"] = None
    intent_router: Optional["IntentRouter"] = None

    def require_catalog(self) -> "Catalog":
        """Return the catalog or raise if the container was built without one."""
        if self.catalog is None:
            raise RuntimeError("Catalog has not been configured.")
        return self.catalog


def build_default_services(*, catalog: Optional["Catalog"] = None) -> ServiceContainer:
    """Return a service container with every fulfillment intent registered."""

    # pylint: disable=import-outside-toplevel
    from .catalog import get_catalog
    from .intent_router import IntentRouter
    from .intents import DEFAULT_INTENT_HANDLERS

    intent_router = IntentRouter(DEFAULT_INTENT_HANDLERS)
    return ServiceContainer(
        catalog=catalog if catalog is not None else get_catalog(),
        intent_router=intent_router,
    )


__all__ = ["ServiceContainer", "build_default_services"]
