import os
import logging
from typing import Optional

import chardet

from .bktree import SearchResult
from .config import (
    DEFAULT_DISTANCE_ALGORITHM,
    DEFAULT_MAX_QUERIES,
    DEFAULT_TOLERANCE,
    DEFAULT_WORD_LIST,
    DISTANCE_ALGORITHMS,
    ENV_DISTANCE_ALGORITHM,
    ENV_MAX_QUERIES,
    ENV_TOLERANCE,
    ENV_WORD_LIST,
    LOG_FORMAT,
    MESSAGES,
)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """Configure the root logger for the command line entry points."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)


def _env_int(name: str, default: int) -> int:
    env_value = os.getenv(name)
    if env_value:
        try:
            value = int(env_value)
        except ValueError:
            logging.warning(f"Ignoring invalid {name}={env_value!r}")
        else:
            if value >= 0:
                return value
            logging.warning(f"Ignoring negative {name}={env_value!r}")
    return default


def get_default_tolerance() -> int:
    """Return the search tolerance from env or configuration.

    ``BKSPELL_TOLERANCE`` takes precedence over the configured default.
    Values that are not non-negative integers are ignored.
    """

    return _env_int(ENV_TOLERANCE, DEFAULT_TOLERANCE)


def get_max_queries() -> int:
    """Return how many queries a terminal session accepts (0 = unlimited)."""

    return _env_int(ENV_MAX_QUERIES, DEFAULT_MAX_QUERIES)


def get_word_list_path() -> str:
    """Return the dictionary path, ``BKSPELL_WORD_LIST`` overriding the default."""

    return os.getenv(ENV_WORD_LIST) or DEFAULT_WORD_LIST


def get_distance_algorithm() -> str:
    """Return the distance backend name from env or configuration.

    Unknown names from the environment are logged and replaced by the
    configured default.
    """

    env_value = os.getenv(ENV_DISTANCE_ALGORITHM)
    if env_value:
        name = env_value.strip().lower()
        if name in DISTANCE_ALGORITHMS:
            return name
        logging.warning(f"Unknown distance algorithm {env_value!r}, using default")
    return DEFAULT_DISTANCE_ALGORITHM


def ensure_unicode(data) -> str:
    """Decode ``data`` to text, guessing the encoding when UTF-8 fails."""
    if isinstance(data, bytes):
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            pass

        detection = chardet.detect(data)
        encoding = detection.get("encoding")
        confidence = detection.get("confidence", 0) or 0
        if encoding and confidence > 0.5:
            try:
                return data.decode(encoding)
            except (UnicodeDecodeError, LookupError):
                pass

        logging.error(
            "Failed to decode text (detected encoding: %s, confidence: %.2f)",
            encoding,
            confidence,
        )
        raise UnicodeDecodeError(encoding or "unknown", data, 0, len(data), "decoding failed")

    return str(data)


def format_suggestions(result: SearchResult) -> str:
    """Render a search result as the line shown to the user.

    Parameters
    ----------
    result:
        Outcome of :meth:`bkspell.bktree.BKTree.search`.

    Returns
    -------
    str
        ``"Word is spelled correctly."`` for an exact match,
        ``"No suggestions found."`` when nothing is within tolerance, or a
        comma separated ``"Did you mean: ...?"`` question otherwise.
    """

    if result.exact_match:
        return MESSAGES["correct"]
    if not result.candidates:
        return MESSAGES["no_suggestions"]
    words = ", ".join(str(c) for c in result.candidates)
    return f"{MESSAGES['suggestions_prefix']}{words}?"


def format_elapsed(seconds: float) -> str:
    """Format a query duration for the terminal."""
    return MESSAGES["timing"].format(elapsed=f"{seconds:.6f}")
