"""Infrastructure adapter exports."""

from .dialogflow_contexts import DialogflowContextStore, short_context_name

__all__ = ["DialogflowContextStore", "short_context_name"]
