"""Dialogflow fulfillment webhook for the book recommendation agent."""

BOOK_CONCIERGE_VERSION = "1.2.0"

__all__ = ["BOOK_CONCIERGE_VERSION"]
