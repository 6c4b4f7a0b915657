"""Intent handlers for the slot-filling recommendation flows.

Two flows share the ``genre_selected`` context:

- genre + reading level: ``GenreBasedRecommendationIntent`` asks for a reading
  level and parks the genre; ``ReadingLevelInputIntent`` resumes it.
- genre + length: ``MultiCriteriaRecommendationIntent`` asks for whichever slot
  is missing; ``LengthInputIntent`` resumes it once a length arrives.
"""

from __future__ import annotations

from typing import Optional

from book_concierge.core.config import config
from book_concierge.core.intents import ContextName
from book_concierge.core.logging import get_logger
from book_concierge.core.models import Context
from book_concierge.services import ServiceContainer
from book_concierge.services.catalog import numbered
from book_concierge.services.intent_router import IntentRequest, IntentResponse

logger = get_logger(__name__)

ASK_GENRE = (
    "What genre of books are you interested in? For example, science fiction, fantasy, "
    "mystery, etc."
)
ASK_READING_LEVEL = (
    "Great choice! Do you prefer books that are easy, moderate, or challenging to read?"
)
READING_LEVEL_SUGGESTIONS = ("Easy", "Moderate", "Challenging")
ASK_CRITERIA = (
    "I can recommend books based on specific criteria. Would you like recommendations based on "
    "genre, book length, or both?"
)
CRITERIA_SUGGESTIONS = ("Genre", "Book length", "Both")
LENGTH_SUGGESTIONS = ("Short books", "Medium-length books", "Long books")
GENRE_SUGGESTIONS = ("Fantasy", "Science Fiction", "Mystery", "Romance")
LOST_GENRE_FOR_READING_LEVEL = (
    "I need to know what genre you're interested in before I can consider reading level. "
    "What type of books do you enjoy?"
)
LOST_GENRE_FOR_LENGTH = (
    "I need to know what genre you're interested in as well. What type of books do you enjoy?"
)
MORE_INFO_PROMPT = "\nWould you like more information about any of these books?"


def _remember_genre(request: IntentRequest, genre: str) -> None:
    request.contexts.set(
        Context(
            name=ContextName.GENRE_SELECTED.value,
            lifespan=config.GENRE_CONTEXT_LIFESPAN,
            parameters={"genre": genre},
        )
    )


def _recommend_by_genre(
    request: IntentRequest,
    services: ServiceContainer,
    genre: str,
    reading_level: Optional[str],
) -> IntentResponse:
    response = IntentResponse(intent=request.intent)
    if not reading_level:
        _remember_genre(request, genre)
        return response.add(ASK_READING_LEVEL).suggest(*READING_LEVEL_SUGGESTIONS)

    catalog = services.require_catalog()
    category = catalog.classifiers.genre.classify(genre)
    logger.info("genre %r classified as %s", genre, category)

    request.contexts.set(
        Context(
            name=ContextName.USER_PREFERENCES.value,
            lifespan=config.PREFERENCES_CONTEXT_LIFESPAN,
            parameters={"genre": genre, "reading_level": reading_level},
        )
    )
    text = (
        f"Based on your interest in {genre} books with {reading_level} reading level, "
        "here are my recommendations:\n\n"
        f"{numbered(catalog.genre_recommendations[category])}"
        f"{MORE_INFO_PROMPT}"
    )
    return response.add(text)


def handle_genre_recommendation(
    request: IntentRequest, services: ServiceContainer
) -> IntentResponse:
    """Recommend books for a genre once the reader's preferred difficulty is known.

    A reading level the user gave earlier in the conversation, kept in the
    ``user_preferences`` context, stands in when this turn carries none.
    """
    genre = request.slot("genre")
    if not genre:
        return IntentResponse(intent=request.intent).add(ASK_GENRE)

    reading_level = request.slot("reading_level")
    if not reading_level:
        preferences = request.contexts.get(ContextName.USER_PREFERENCES.value)
        reading_level = preferences.get("reading_level") if preferences else None
    return _recommend_by_genre(request, services, genre, reading_level)


def handle_reading_level_input(
    request: IntentRequest, services: ServiceContainer
) -> IntentResponse:
    """Resume the genre flow with the reading level the user just gave.

    Only this turn's answer counts; an empty answer asks again rather than
    reusing a remembered preference.
    """
    genre_context = request.contexts.get(ContextName.GENRE_SELECTED.value)
    genre = genre_context.get("genre") if genre_context else None
    if not genre:
        logger.info("reading level received without a genre_selected context")
        return IntentResponse(intent=request.intent).add(LOST_GENRE_FOR_READING_LEVEL)

    return _recommend_by_genre(request, services, genre, request.slot("reading_level"))


def _recommend_by_criteria(
    request: IntentRequest,
    services: ServiceContainer,
    genre: Optional[str],
    length: Optional[str],
) -> IntentResponse:
    response = IntentResponse(intent=request.intent)
    if not genre and not length:
        return response.add(ASK_CRITERIA).suggest(*CRITERIA_SUGGESTIONS)

    if genre and not length:
        _remember_genre(request, genre)
        return response.add(
            f"Great! You're interested in {genre} books. Do you prefer short books "
            "(under 300 pages), medium-length books (300-500 pages), or long books "
            "(over 500 pages)?"
        ).suggest(*LENGTH_SUGGESTIONS)

    if length and not genre:
        request.contexts.set(
            Context(
                name=ContextName.LENGTH_SELECTED.value,
                lifespan=config.LENGTH_CONTEXT_LIFESPAN,
                parameters={"length": length},
            )
        )
        return response.add(
            f"I see you're looking for {length} books. What genre are you interested in?"
        ).suggest(*GENRE_SUGGESTIONS)

    catalog = services.require_catalog()
    genre_category = catalog.classifiers.criteria_genre.classify(genre)
    length_category = catalog.classifiers.length.classify(length)
    logger.info(
        "criteria (%r, %r) classified as (%s, %s)", genre, length, genre_category, length_category
    )
    picks = catalog.length_recommendations[genre_category][length_category]
    text = (
        f"Based on your criteria (genre: {genre}, length: {length}), here are some "
        "recommendations:\n\n"
        f"{numbered(picks)}"
        f"{MORE_INFO_PROMPT}"
    )
    return response.add(text)


def handle_multi_criteria_recommendation(
    request: IntentRequest, services: ServiceContainer
) -> IntentResponse:
    """Recommend books matching both a genre and a preferred length."""
    genre = request.slot("genre")
    length = request.slot("length")
    if genre and not length:
        length_context = request.contexts.get(ContextName.LENGTH_SELECTED.value)
        length = length_context.get("length") if length_context else None
    return _recommend_by_criteria(request, services, genre, length)


def handle_length_input(request: IntentRequest, services: ServiceContainer) -> IntentResponse:
    """Resume the multi-criteria flow with the length the user just gave."""
    genre_context = request.contexts.get(ContextName.GENRE_SELECTED.value)
    genre = genre_context.get("genre") if genre_context else None
    if not genre:
        logger.info("length received without a genre_selected context")
        return IntentResponse(intent=request.intent).add(LOST_GENRE_FOR_LENGTH)

    return _recommend_by_criteria(request, services, genre, request.slot("length"))


__all__ = [
    "handle_genre_recommendation",
    "handle_length_input",
    "handle_multi_criteria_recommendation",
    "handle_reading_level_input",
]
