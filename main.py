"""ASGI entrypoint: ``uvicorn main:app``."""

from book_concierge.api_factory import create_app

app = create_app()
