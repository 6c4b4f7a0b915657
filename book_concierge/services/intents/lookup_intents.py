"""Single-slot intent handlers: similar books, book details, top rated, and authors."""

from __future__ import annotations

from book_concierge.core.logging import get_logger
from book_concierge.services import ServiceContainer
from book_concierge.services.catalog import numbered
from book_concierge.services.intent_router import IntentRequest, IntentResponse

logger = get_logger(__name__)

ASK_BOOK_TITLE = "What book did you enjoy that you want similar recommendations for?"
ASK_BOOK_INFO = "What book would you like information about?"
ASK_AUTHOR = "Which author are you interested in?"


def handle_similar_book_recommendation(
    request: IntentRequest, services: ServiceContainer
) -> IntentResponse:
    """Suggest titles in the same vein as a book the user enjoyed."""
    response = IntentResponse(intent=request.intent)
    book_title = request.slot("book_title")
    if not book_title:
        return response.add(ASK_BOOK_TITLE)

    catalog = services.require_catalog()
    category = catalog.classifiers.similar_title.classify(book_title)
    logger.info("similar title %r classified as %s", book_title, category)
    return response.add(
        f'Since you enjoyed "{book_title}", you might also like:\n\n'
        f"{numbered(catalog.similar_books[category])}"
        f'\nThese books share similar themes, styles, or settings with "{book_title}".'
    )


def handle_book_information(
    request: IntentRequest, services: ServiceContainer
) -> IntentResponse:
    """Describe a known book, or say plainly that we have no details for it."""
    response = IntentResponse(intent=request.intent)
    book_info = request.slot("book_info")
    if not book_info:
        return response.add(ASK_BOOK_INFO)

    catalog = services.require_catalog()
    category = catalog.classifiers.book_info.classify(book_info)
    logger.info("book info %r classified as %s", book_info, category)
    details = catalog.book_details[category]
    lines = [
        f'Here\'s information about "{book_info}":\n',
        f"Author: {details.author}",
        f"Published: {details.published}",
        f"Genre: {details.genre}",
        f"Pages: {details.pages}",
        f"Rating: {details.rating}\n",
        f"Brief description: {details.description}",
    ]
    if details.notice:
        lines.append(f"\n{details.notice}")
    lines.append("\nWould you like recommendations for similar books?")
    return response.add("\n".join(lines))


def handle_top_rated_books(request: IntentRequest, services: ServiceContainer) -> IntentResponse:
    """List the highest-rated books, optionally narrowed to one genre."""
    catalog = services.require_catalog()
    genre = request.slot("genre")
    if genre:
        category = catalog.classifiers.genre.classify(genre)
        logger.info("top rated genre %r classified as %s", genre, category)
        heading = f"Here are some of the highest-rated {genre} books:\n\n"
        picks = catalog.top_rated[category]
    else:
        heading = "Here are some of the highest-rated books of all time:\n\n"
        picks = catalog.top_rated_all_time

    return IntentResponse(intent=request.intent).add(
        f"{heading}{numbered(picks)}"
        "\nThese books have consistently received praise from readers worldwide. "
        "Would you like more information about any of them?"
    )


def handle_author_recommendation(
    request: IntentRequest, services: ServiceContainer
) -> IntentResponse:
    """List an author's notable works."""
    response = IntentResponse(intent=request.intent)
    author = request.slot("author")
    if not author:
        return response.add(ASK_AUTHOR)

    catalog = services.require_catalog()
    category = catalog.classifiers.author.classify(author)
    logger.info("author %r classified as %s", author, category)
    entry = catalog.author_works[category]
    return response.add(
        f"Here are some notable works by {author}:\n\n"
        f"{numbered(entry.works)}\n"
        f"{entry.note}\n"
        "Would you like recommendations for similar authors?"
    )


__all__ = [
    "handle_author_recommendation",
    "handle_book_information",
    "handle_similar_book_recommendation",
    "handle_top_rated_books",
]
