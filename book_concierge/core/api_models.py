"""Wire models for the Dialogflow ES webhook request and response bodies."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class DialogflowIntent(_CamelModel):
    """Intent reference inside ``queryResult``."""

    name: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")


class DialogflowContext(_CamelModel):
    """Context object as sent and received on the wire."""

    name: str
    lifespan_count: int = Field(default=0, alias="lifespanCount")
    parameters: dict[str, Any] = Field(default_factory=dict)


class QueryResult(_CamelModel):
    """Classification result produced by Dialogflow for one user turn."""

    query_text: str | None = Field(default=None, alias="queryText")
    language_code: str | None = Field(default=None, alias="languageCode")
    parameters: dict[str, Any] = Field(default_factory=dict)
    intent: DialogflowIntent | None = None
    output_contexts: list[DialogflowContext] = Field(
        default_factory=list, alias="outputContexts"
    )


class WebhookRequest(_CamelModel):
    """Request body for POST /webhook."""

    response_id: str | None = Field(default=None, alias="responseId")
    session: str = Field(default="", description="projects/<p>/agent/sessions/<s>")
    query_result: QueryResult | None = Field(default=None, alias="queryResult")
    original_detect_intent_request: dict[str, Any] | None = Field(
        default=None, alias="originalDetectIntentRequest"
    )


class TextMessage(_CamelModel):
    """``{"text": {"text": [...]}}`` fulfillment message."""

    text: dict[str, list[str]]


class QuickRepliesMessage(_CamelModel):
    """``{"quickReplies": {"quickReplies": [...]}}`` fulfillment message."""

    quick_replies: dict[str, list[str]] = Field(alias="quickReplies")


class WebhookResponse(_CamelModel):
    """Response body returned to Dialogflow."""

    fulfillment_text: str = Field(default="", alias="fulfillmentText")
    fulfillment_messages: list[TextMessage | QuickRepliesMessage] = Field(
        default_factory=list, alias="fulfillmentMessages"
    )
    output_contexts: list[DialogflowContext] = Field(
        default_factory=list, alias="outputContexts"
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize with Dialogflow's camelCase field names."""
        return self.model_dump(by_alias=True)


__all__ = [
    "DialogflowContext",
    "DialogflowIntent",
    "QueryResult",
    "QuickRepliesMessage",
    "TextMessage",
    "WebhookRequest",
    "WebhookResponse",
]
