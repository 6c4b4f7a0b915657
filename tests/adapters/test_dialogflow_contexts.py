"""Tests for the Dialogflow-backed context store."""

from __future__ import annotations

from book_concierge.adapters.dialogflow_contexts import (
    DialogflowContextStore,
    short_context_name,
)
from book_concierge.core.api_models import DialogflowContext
from book_concierge.core.models import Context

SESSION = "projects/p/agent/sessions/abc"


def test_short_context_name_strips_session_prefix():
    assert short_context_name(f"{SESSION}/contexts/genre_selected") == "genre_selected"
    assert short_context_name("genre_selected") == "genre_selected"


def test_get_reads_inbound_contexts_by_short_name():
    store = DialogflowContextStore(
        SESSION,
        [
            DialogflowContext(
                name=f"{SESSION}/contexts/genre_selected",
                lifespan_count=3,
                parameters={"genre": "romance", "genre.original": "romance"},
            )
        ],
    )

    ctx = store.get("genre_selected")

    assert ctx is not None
    assert ctx.lifespan == 3
    assert ctx.get("genre") == "romance"
    assert store.get("length_selected") is None
    assert store.written() == []
    assert store.to_wire() == []


def test_set_is_visible_to_later_reads_and_last_write_wins():
    store = DialogflowContextStore(SESSION + "/")
    store.set(Context(name="user_preferences", lifespan=50, parameters={"genre": "a"}))
    store.set(Context(name="user_preferences", lifespan=50, parameters={"genre": "b"}))

    assert store.get("user_preferences").get("genre") == "b"  # type: ignore[union-attr]
    wire = store.to_wire()
    assert len(wire) == 1
    assert wire[0].name == f"{SESSION}/contexts/user_preferences"
    assert wire[0].lifespan_count == 50
    assert wire[0].parameters == {"genre": "b"}


def test_context_get_normalizes_empty_values():
    ctx = Context(name="x", lifespan=1, parameters={"genre": "", "level": ["", "easy"]})
    assert ctx.get("genre") is None
    assert ctx.get("level") == "easy"
    assert ctx.get("missing") is None
