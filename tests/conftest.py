"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so local overrides are honored.
"""
from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Callable

import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# Keep test runs from writing into the repository logs directory
os.environ.setdefault("BOOK_CONCIERGE_LOG_DIR", tempfile.mkdtemp(prefix="book-concierge-logs-"))

# pylint: disable=wrong-import-position
from book_concierge.adapters.dialogflow_contexts import DialogflowContextStore  # noqa: E402
from book_concierge.core.api_models import DialogflowContext  # noqa: E402
from book_concierge.core.intents import IntentType  # noqa: E402
from book_concierge.services import ServiceContainer, build_default_services  # noqa: E402
from book_concierge.services.intent_router import IntentRequest  # noqa: E402

SESSION = "projects/test-agent/agent/sessions/session-123"


@pytest.fixture
def services() -> ServiceContainer:
    """Default service container with the packaged catalog."""
    return build_default_services()


@pytest.fixture
def make_request() -> Callable[..., IntentRequest]:
    """Build an ``IntentRequest`` backed by a fresh Dialogflow context store."""

    def _make(
        intent: IntentType,
        parameters: dict[str, Any] | None = None,
        contexts: dict[str, dict[str, Any]] | None = None,
    ) -> IntentRequest:
        inbound = [
            DialogflowContext(
                name=f"{SESSION}/contexts/{name}", lifespan_count=5, parameters=params
            )
            for name, params in (contexts or {}).items()
        ]
        return IntentRequest(
            intent=intent,
            parameters=parameters or {},
            contexts=DialogflowContextStore(SESSION, inbound),
        )

    return _make


def make_webhook_body(
    display_name: str | None,
    parameters: dict[str, Any] | None = None,
    contexts: dict[str, dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Return a Dialogflow ES webhook request body."""
    intent: dict[str, Any] = {"name": f"projects/test-agent/agent/intents/{display_name}"}
    if display_name is not None:
        intent["displayName"] = display_name
    return {
        "responseId": "response-1",
        "session": SESSION,
        "queryResult": {
            "queryText": "hello",
            "languageCode": "en",
            "parameters": parameters or {},
            "intent": intent,
            "outputContexts": [
                {"name": f"{SESSION}/contexts/{name}", "lifespanCount": 4, "parameters": params}
                for name, params in (contexts or {}).items()
            ],
        },
        "originalDetectIntentRequest": {"source": "DIALOGFLOW_CONSOLE", "payload": {}},
    }


@pytest.fixture
def webhook_body() -> Callable[..., dict[str, Any]]:
    """Factory fixture exposing :func:`make_webhook_body`."""
    return make_webhook_body
