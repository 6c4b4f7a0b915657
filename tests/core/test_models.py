"""Tests for core data models."""

from __future__ import annotations

import pytest

from book_concierge.core.api_models import QuickRepliesMessage, TextMessage, WebhookResponse
from book_concierge.core.intents import IntentType
from book_concierge.core.models import normalize_slot


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, None),
        ("", None),
        ("  fantasy ", "fantasy"),
        ([], None),
        (["", "mystery"], "mystery"),
        ({"name": "Tolkien"}, "Tolkien"),
        ({"unrelated": "x"}, None),
        (1984, "1984"),
    ],
)
def test_normalize_slot(value, expected):
    assert normalize_slot(value) == expected


def test_intent_type_from_display_name():
    assert IntentType.from_display_name("LengthInputIntent") is IntentType.LENGTH_INPUT
    assert IntentType.from_display_name("Default Welcome Intent") is None


def test_webhook_response_serializes_camel_case():
    response = WebhookResponse(
        fulfillment_text="hi",
        fulfillment_messages=[
            TextMessage(text={"text": ["hi"]}),
            QuickRepliesMessage(quick_replies={"quickReplies": ["Yes"]}),
        ],
    )

    assert response.to_wire() == {
        "fulfillmentText": "hi",
        "fulfillmentMessages": [
            {"text": {"text": ["hi"]}},
            {"quickReplies": {"quickReplies": ["Yes"]}},
        ],
        "outputContexts": [],
    }
