"""Core data transfer objects shared across layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True, slots=True)
class Context:
    """Named conversation state carried by the platform between turns.

    ``name`` is always the short context name (``genre_selected``), never the
    fully qualified session path used on the wire.
    """

    name: str
    lifespan: int
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        """Return a parameter as a non-empty string, or ``None``."""
        return normalize_slot(self.parameters.get(key))


@dataclass(frozen=True, slots=True)
class TextFragment:
    """A block of plain text to show the end user."""

    text: str


@dataclass(frozen=True, slots=True)
class SuggestionFragment:
    """A quick-reply chip offered alongside the text output."""

    title: str


Fragment = Union[TextFragment, SuggestionFragment]


def normalize_slot(value: Any) -> Optional[str]:
    """Collapse Dialogflow's empty parameter shapes into ``None``.

    Dialogflow sends ``""`` for unfilled parameters and may send a list for
    parameters marked "is list"; the first non-empty entry wins.
    """
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        for item in value:
            normalized = normalize_slot(item)
            if normalized:
                return normalized
        return None
    if isinstance(value, Mapping):
        # System entities like @sys.any-with-name come through as {"name": ...}
        for key in ("name", "value", "original"):
            if key in value:
                return normalize_slot(value[key])
        return None
    text = str(value).strip()
    return text or None


__all__ = [
    "Context",
    "Fragment",
    "SuggestionFragment",
    "TextFragment",
    "normalize_slot",
]
