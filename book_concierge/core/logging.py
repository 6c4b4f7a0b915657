"""JSON logging for webhook turns.

Every record is tagged with the turn it belongs to. The HTTP middleware binds
the correlation id and caller address; fulfillment adds the Dialogflow session
and the intent display name once the request body has been decoded. Fields
nobody bound render as ``"-"``.

Records go to stdout and, when a writable directory can be found, to a
rotating ``book_concierge.log`` file. A deployment on a read-only filesystem
still logs to stdout.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterator, Mapping, Optional

from pythonjsonlogger import jsonlogger

from book_concierge import BOOK_CONCIERGE_VERSION
from book_concierge.core.config import settings

TURN_FIELDS = ("correlation_id", "client_ip", "session", "intent")
SESSION_PATH_MARKER = "/sessions/"

_turn: ContextVar[Mapping[str, str]] = ContextVar("book_concierge_turn", default={})

LEVEL_NAME = str(settings.BOOK_CONCIERGE_LOG_LEVEL).upper()
LOG_LEVEL = getattr(logging, LEVEL_NAME, logging.INFO)

REPO_LOGS_DIR = Path(__file__).resolve().parents[2] / "logs"
LOG_FILE_NAME = "book_concierge.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def session_tail(session: Optional[str]) -> Optional[str]:
    """Return the session id from a ``projects/.../sessions/<id>`` path."""
    if not session:
        return None
    _, marker, tail = session.rpartition(SESSION_PATH_MARKER)
    return tail if marker else session


def bind_turn(**fields: Optional[str]) -> Token[Mapping[str, str]]:
    """Add ``fields`` to the current turn; ``None`` values leave a field unset."""
    unknown = set(fields) - set(TURN_FIELDS)
    if unknown:
        raise ValueError(f"unknown turn fields: {sorted(unknown)}")
    merged = dict(_turn.get())
    merged.update({key: value for key, value in fields.items() if value})
    return _turn.set(merged)


def reset_turn(token: Token[Mapping[str, str]]) -> None:
    _turn.reset(token)


def current_turn() -> dict[str, str]:
    """Fields bound for the turn being served."""
    return dict(_turn.get())


@contextmanager
def turn_context(**fields: Optional[str]) -> Iterator[None]:
    token = bind_turn(**fields)
    try:
        yield
    finally:
        reset_turn(token)


class TurnContextFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Copy the bound turn fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        turn = _turn.get()
        for field in TURN_FIELDS:
            setattr(record, field, turn.get(field, "-"))
        return True


def resolve_log_file(configured_dir: Optional[Path], fallback_dir: Path) -> Optional[Path]:
    """Pick the log file location, or ``None`` when only stdout is usable.

    ``BOOK_CONCIERGE_LOG_DIR`` wins when it can be created; otherwise the
    checkout's ``logs/`` directory is tried.
    """
    for directory in (configured_dir, fallback_dir):
        if directory is None:
            continue
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError:
            continue
        return directory / LOG_FILE_NAME
    return None


LOG_FILE_PATH = resolve_log_file(settings.BOOK_CONCIERGE_LOG_DIR, REPO_LOGS_DIR)


def build_formatter() -> jsonlogger.JsonFormatter:
    return jsonlogger.JsonFormatter(
        " ".join(["%(asctime)s", "%(levelname)s", "%(name)s", "%(message)s"])
        + " "
        + " ".join(f"%({field})s" for field in TURN_FIELDS),
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
            "correlation_id": "cid",
        },
        static_fields={"service": "book-concierge", "version": BOOK_CONCIERGE_VERSION},
        datefmt="%Y-%m-%d %H:%M:%S",
        json_ensure_ascii=False,
    )


def _ensure_handlers(logger: logging.Logger) -> None:
    if logger.handlers:
        return

    formatter = build_formatter()
    turn_filter = TurnContextFilter()
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if LOG_FILE_PATH is not None:
        handlers.append(
            RotatingFileHandler(
                LOG_FILE_PATH,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        )
    for handler in handlers:
        handler.addFilter(turn_filter)
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger that writes JSON tagged with the current turn."""
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    _ensure_handlers(logger)
    return logger


__all__ = [
    "LOG_FILE_PATH",
    "TURN_FIELDS",
    "TurnContextFilter",
    "bind_turn",
    "build_formatter",
    "current_turn",
    "get_logger",
    "reset_turn",
    "resolve_log_file",
    "session_tail",
    "turn_context",
]
