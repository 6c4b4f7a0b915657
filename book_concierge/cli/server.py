"""``serve`` command: run the webhook under uvicorn."""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn

from book_concierge.core.config import config


def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default: HOST)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Listen port (default: PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
) -> None:
    """Serve the Dialogflow fulfillment webhook."""
    uvicorn.run(
        "book_concierge.api_factory:create_app",
        factory=True,
        host=host or config.HOST,
        port=port or config.PORT,
        reload=reload,
        log_config=None,  # Use our JSON logging
    )


__all__ = ["serve"]
