"""Registry of fulfillment handlers keyed by Dialogflow intent."""

from __future__ import annotations

from typing import Mapping

from book_concierge.core.intents import IntentType
from book_concierge.services.intent_router import IntentHandler

from .lookup_intents import (
    handle_author_recommendation,
    handle_book_information,
    handle_similar_book_recommendation,
    handle_top_rated_books,
)
from .recommendation_intents import (
    handle_genre_recommendation,
    handle_length_input,
    handle_multi_criteria_recommendation,
    handle_reading_level_input,
)

DEFAULT_INTENT_HANDLERS: Mapping[IntentType, IntentHandler] = {
    IntentType.GENRE_BASED_RECOMMENDATION: handle_genre_recommendation,
    IntentType.SIMILAR_BOOK_RECOMMENDATION: handle_similar_book_recommendation,
    IntentType.BOOK_INFORMATION: handle_book_information,
    IntentType.TOP_RATED_BOOKS: handle_top_rated_books,
    IntentType.MULTI_CRITERIA_RECOMMENDATION: handle_multi_criteria_recommendation,
    IntentType.AUTHOR_BASED_RECOMMENDATION: handle_author_recommendation,
    IntentType.READING_LEVEL_INPUT: handle_reading_level_input,
    IntentType.LENGTH_INPUT: handle_length_input,
}

__all__ = ["DEFAULT_INTENT_HANDLERS"]
