"""Intent types recognized by the fulfillment webhook."""

from __future__ import annotations

from enum import Enum


class IntentType(str, Enum):
    """Enumeration of the Dialogflow intent display names we fulfill."""

    GENRE_BASED_RECOMMENDATION = "GenreBasedRecommendationIntent"
    SIMILAR_BOOK_RECOMMENDATION = "SimilarBookRecommendationIntent"
    BOOK_INFORMATION = "BookInformationIntent"
    TOP_RATED_BOOKS = "TopRatedBooksIntent"
    MULTI_CRITERIA_RECOMMENDATION = "MultiCriteriaRecommendationIntent"
    AUTHOR_BASED_RECOMMENDATION = "AuthorBasedRecommendationIntent"
    READING_LEVEL_INPUT = "ReadingLevelInputIntent"
    LENGTH_INPUT = "LengthInputIntent"

    @classmethod
    def from_display_name(cls, display_name: str) -> "IntentType | None":
        """Return the matching member, or ``None`` for names we do not know."""
        try:
            return cls(display_name)
        except ValueError:
            return None


class ContextName(str, Enum):
    """Names of the conversation contexts read and written by handlers."""

    GENRE_SELECTED = "genre_selected"
    LENGTH_SELECTED = "length_selected"
    USER_PREFERENCES = "user_preferences"


__all__ = ["IntentType", "ContextName"]
