"""CLI commands for inspecting and exercising registered intents."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table

from book_concierge.adapters.dialogflow_contexts import short_context_name
from book_concierge.core.api_models import (
    DialogflowContext,
    DialogflowIntent,
    QueryResult,
    WebhookRequest,
)
from book_concierge.services import build_default_services
from book_concierge.services.fulfillment import fulfill

app = typer.Typer(name="intents", help="Inspect and simulate fulfillment intents")
console = Console()

SIMULATED_SESSION = "projects/local/agent/sessions/cli"


def _parse_pairs(values: list[str], option: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for value in values:
        key, sep, val = value.partition("=")
        if not sep or not key:
            console.print(f"[red]Error:[/red] {option} expects key=value, got {value!r}")
            raise typer.Exit(1)
        pairs[key.strip()] = val.strip()
    return pairs


def _parse_contexts(values: list[str]) -> list[DialogflowContext]:
    """Parse ``name:key=value,key=value`` into inbound contexts."""
    contexts: list[DialogflowContext] = []
    for value in values:
        name, _, params = value.partition(":")
        if not name:
            console.print(f"[red]Error:[/red] --context expects name:key=value, got {value!r}")
            raise typer.Exit(1)
        pairs = [p for p in params.split(",") if p]
        parameters = _parse_pairs(pairs, "--context") if pairs else {}
        contexts.append(
            DialogflowContext(
                name=f"{SIMULATED_SESSION}/contexts/{name}",
                lifespan_count=5,
                parameters=parameters,
            )
        )
    return contexts


@app.command("list")
def list_intents() -> None:
    """Show every registered intent and the handler that serves it."""
    services = build_default_services()
    router = services.intent_router
    if router is None:
        console.print("[red]No intent router configured.[/red]")
        raise typer.Exit(1)

    table = Table(title="Registered intents")
    table.add_column("Intent", style="cyan")
    table.add_column("Handler")
    for intent, handler in router.handlers().items():
        table.add_row(intent.value, getattr(handler, "__name__", repr(handler)))
    console.print(table)


@app.command("simulate")
def simulate(
    intent: str = typer.Argument(
        ..., help="Intent display name, e.g. GenreBasedRecommendationIntent"
    ),
    param: list[str] = typer.Option([], "--param", "-p", help="Parameter as key=value"),
    context: list[str] = typer.Option(
        [], "--context", "-c", help="Inbound context as name:key=value,key=value"
    ),
    raw: bool = typer.Option(False, "--json", help="Print the raw webhook response JSON"),
) -> None:
    """Dispatch a synthetic Dialogflow request locally and print the reply."""
    payload = WebhookRequest(
        session=SIMULATED_SESSION,
        query_result=QueryResult(
            parameters=_parse_pairs(param, "--param"),
            intent=DialogflowIntent(display_name=intent),
            output_contexts=_parse_contexts(context),
        ),
    )
    response = fulfill(payload, build_default_services())

    if raw:
        typer.echo(json.dumps(response.to_wire(), indent=2, ensure_ascii=False))
        return

    console.print(response.fulfillment_text, markup=False, highlight=False)
    for message in response.fulfillment_messages:
        quick_replies = getattr(message, "quick_replies", None)
        if quick_replies:
            console.print(f"\n[bold]Suggestions:[/bold] {', '.join(quick_replies['quickReplies'])}")
    for ctx in response.output_contexts:
        console.print(
            f"[green]context[/green] {short_context_name(ctx.name)} "
            f"lifespan={ctx.lifespan_count} parameters={ctx.parameters}"
        )


__all__ = ["app"]
