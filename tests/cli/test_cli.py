"""Tests for the Typer CLI."""
# pylint: disable=missing-function-docstring

from __future__ import annotations

import json

from typer.testing import CliRunner

from book_concierge.cli import main_app

runner = CliRunner()


def test_intents_list_shows_every_intent() -> None:
    result = runner.invoke(main_app, ["intents", "list"])
    assert result.exit_code == 0, result.output
    assert "GenreBasedRecommendationIntent" in result.output
    assert "LengthInputIntent" in result.output


def test_simulate_prints_prompt_suggestions_and_context() -> None:
    result = runner.invoke(
        main_app,
        ["intents", "simulate", "GenreBasedRecommendationIntent", "--param", "genre=fantasy"],
    )
    assert result.exit_code == 0, result.output
    assert "Great choice!" in result.output
    assert "Easy, Moderate, Challenging" in result.output
    assert "genre_selected" in result.output


def test_simulate_with_inbound_context_as_json() -> None:
    result = runner.invoke(
        main_app,
        [
            "intents",
            "simulate",
            "LengthInputIntent",
            "-p",
            "length=short",
            "-c",
            "genre_selected:genre=mystery",
            "--json",
        ],
    )
    assert result.exit_code == 0, result.output
    body = json.loads(result.output)
    assert "The Maltese Falcon" in body["fulfillmentText"]


def test_simulate_rejects_malformed_param() -> None:
    result = runner.invoke(
        main_app, ["intents", "simulate", "TopRatedBooksIntent", "--param", "genre"]
    )
    assert result.exit_code == 1


def test_serve_passes_options_to_uvicorn(monkeypatch) -> None:
    calls: dict = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr("book_concierge.cli.server.uvicorn.run", fake_run)
    result = runner.invoke(main_app, ["serve", "--port", "8080"])

    assert result.exit_code == 0, result.output
    assert calls["app"] == "book_concierge.api_factory:create_app"
    assert calls["factory"] is True
    assert calls["port"] == 8080
    assert calls["host"] == "0.0.0.0"
