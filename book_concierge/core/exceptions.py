"""Core exception types shared across layers."""


class CatalogError(Exception):
    """Raised when the recommendation catalog cannot be loaded or is inconsistent."""


class MalformedWebhookRequestError(ValueError):
    """Raised when an inbound webhook payload lacks the fields needed to dispatch."""


__all__ = [
    "CatalogError",
    "MalformedWebhookRequestError",
]
