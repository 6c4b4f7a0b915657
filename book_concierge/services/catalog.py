"""Static recommendation catalog and the keyword classifiers that index it.

The catalog is data, not logic: every canned recommendation lives in
``book_concierge/data/catalog.json``. Handlers classify a free-text slot value
into a category with a :class:`KeywordClassifier` and then look that category
up in one of the tables below.

Classification is first-match-wins over the ordered category list, using
case-insensitive substring containment. A value matching nothing maps to the
classifier's named ``fallback`` category.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from book_concierge.core.config import config
from book_concierge.core.exceptions import CatalogError
from book_concierge.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "catalog.json"


class KeywordCategory(BaseModel):
    """One category and the lowercase keywords that select it."""

    name: str
    keywords: list[str] = Field(min_length=1)


class KeywordClassifier(BaseModel):
    """Ordered ``(category, keywords)`` pairs with an explicit fallback."""

    categories: list[KeywordCategory]
    fallback: str

    @model_validator(mode="after")
    def _check_unique_names(self) -> "KeywordClassifier":
        names = [category.name for category in self.categories]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate category names: {names}")
        if self.fallback in names:
            raise ValueError(f"fallback {self.fallback!r} must not also be a keyword category")
        return self

    def classify(self, value: Optional[str]) -> str:
        """Return the first category whose keyword occurs in ``value``."""
        if value:
            lowered = value.lower()
            for category in self.categories:
                if any(keyword.lower() in lowered for keyword in category.keywords):
                    return category.name
        return self.fallback

    def names(self) -> list[str]:
        """All categories this classifier can produce, fallback last."""
        return [category.name for category in self.categories] + [self.fallback]


class BookDetails(BaseModel):
    """Metadata block rendered by the book information intent."""

    author: str
    published: str
    genre: str
    pages: str
    rating: str
    description: str
    notice: Optional[str] = None


class AuthorWorks(BaseModel):
    """Notable works and a one-line remark for an author."""

    works: list[str]
    note: str


class Classifiers(BaseModel):
    """The classifiers used by each intent handler."""

    genre: KeywordClassifier
    criteria_genre: KeywordClassifier
    length: KeywordClassifier
    similar_title: KeywordClassifier
    book_info: KeywordClassifier
    author: KeywordClassifier


class Catalog(BaseModel):
    """Validated view of ``catalog.json``."""

    classifiers: Classifiers
    genre_recommendations: dict[str, list[str]]
    similar_books: dict[str, list[str]]
    book_details: dict[str, BookDetails]
    top_rated: dict[str, list[str]]
    top_rated_all_time: list[str]
    length_recommendations: dict[str, dict[str, list[str]]]
    author_works: dict[str, AuthorWorks]

    @model_validator(mode="after")
    def _check_tables_cover_classifiers(self) -> "Catalog":
        c = self.classifiers
        _require_keys("genre_recommendations", self.genre_recommendations, c.genre.names())
        _require_keys("top_rated", self.top_rated, c.genre.names())
        _require_keys("similar_books", self.similar_books, c.similar_title.names())
        _require_keys("book_details", self.book_details, c.book_info.names())
        _require_keys("author_works", self.author_works, c.author.names())
        _require_keys(
            "length_recommendations", self.length_recommendations, c.criteria_genre.names()
        )
        for genre, by_length in self.length_recommendations.items():
            _require_keys(f"length_recommendations.{genre}", by_length, c.length.names())
        return self


def _require_keys(table: str, mapping: dict, required: Iterable[str]) -> None:
    missing = [key for key in required if key not in mapping]
    if missing:
        raise ValueError(f"{table} is missing entries for {missing}")


def load_catalog(path: Path | None = None) -> Catalog:
    """Read and validate a catalog file, raising :class:`CatalogError` on failure."""
    catalog_path = Path(path) if path else DEFAULT_CATALOG_PATH
    try:
        raw = json.loads(catalog_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogError(f"catalog file not found: {catalog_path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"catalog file is not valid JSON: {catalog_path}: {exc}") from exc
    try:
        catalog = Catalog.model_validate(raw)
    except ValidationError as exc:
        raise CatalogError(f"catalog file failed validation: {catalog_path}: {exc}") from exc
    logger.info("catalog loaded from %s", catalog_path)
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Return the process-wide catalog, loading it on first use."""
    return load_catalog(config.CATALOG_PATH)


def numbered(lines: Iterable[str]) -> str:
    """Render ``lines`` as a ``1. ...`` list, one per line, with a trailing newline."""
    return "".join(f"{index}. {line}\n" for index, line in enumerate(lines, start=1))


__all__ = [
    "AuthorWorks",
    "BookDetails",
    "Catalog",
    "KeywordCategory",
    "KeywordClassifier",
    "DEFAULT_CATALOG_PATH",
    "get_catalog",
    "load_catalog",
    "numbered",
]
