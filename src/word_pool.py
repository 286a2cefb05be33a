"""Turn raw (word, definition) pairs into the candidate pool for one puzzle."""

from __future__ import annotations

import random
from collections.abc import Iterable

from logger import get_logger
from models import InsufficientWordsError, WordEntry

LOGGER = get_logger(__name__)

MIN_LENGTH = 3
MAX_LENGTH = 11
MAX_POOL = 7
MIN_WORDS = 4


def normalize_answer(raw: str) -> str:
    """Uppercase, strip everything except A-Z."""
    return "".join(c for c in raw.upper() if "A" <= c <= "Z")


def select_pool(
    pairs: Iterable[tuple[str, str]],
    rng: random.Random | None = None,
    max_pool: int = MAX_POOL,
    min_words: int = MIN_WORDS,
    min_length: int = MIN_LENGTH,
    max_length: int = MAX_LENGTH,
) -> list[WordEntry]:
    """Normalize, length-filter, shuffle, cap and sort *pairs*, longest first.

    Raises InsufficientWordsError if fewer than *min_words* entries survive
    the length filter.
    """
    rng = rng or random.Random()
    entries = _filter_entries(pairs, min_length, max_length)

    if len(entries) < min_words:
        raise InsufficientWordsError(len(entries), min_words)

    rng.shuffle(entries)
    pool = entries[:max_pool]
    pool.sort(key=lambda e: len(e.answer), reverse=True)
    return pool


def _filter_entries(
    pairs: Iterable[tuple[str, str]], min_length: int, max_length: int,
) -> list[WordEntry]:
    result: list[WordEntry] = []
    for word, definition in pairs:
        answer = normalize_answer(word or "")
        if not min_length <= len(answer) <= max_length:
            LOGGER.debug("Skipping %r (%d letters after normalization)", word, len(answer))
            continue
        result.append(WordEntry(answer=answer, clue_text=definition or ""))
    return result
