"""Build a crossword Solution from a list of (word, definition) pairs."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

from grid_builder import build_solution
from grid_placer import CANVAS_SIZE, MAX_PASSES, new_canvas, place_words
from logger import get_logger
from models import DropPolicy, Solution
from word_pool import MAX_LENGTH, MAX_POOL, MIN_LENGTH, MIN_WORDS, select_pool

LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    """Tunables for one generation call."""

    canvas_size: int = CANVAS_SIZE
    max_pool: int = MAX_POOL
    min_words: int = MIN_WORDS
    min_length: int = MIN_LENGTH
    max_length: int = MAX_LENGTH
    max_passes: int = MAX_PASSES
    drop_policy: DropPolicy = DropPolicy.LENIENT

    def __post_init__(self) -> None:
        if self.max_length > self.canvas_size:
            raise ValueError(
                f"max_length {self.max_length} does not fit a {self.canvas_size}x{self.canvas_size} canvas"
            )
        if self.max_passes < 1:
            raise ValueError("max_passes must be at least 1")


def generate(
    pairs: Iterable[tuple[str, str]],
    rng: random.Random | None = None,
    config: GeneratorConfig | None = None,
) -> Solution:
    """Select a pool, place it on a fresh canvas, trim and number it.

    Raises InsufficientWordsError when fewer than ``config.min_words`` words
    survive filtering or placement.
    """
    config = config or GeneratorConfig()
    pool = select_pool(
        pairs,
        rng=rng,
        max_pool=config.max_pool,
        min_words=config.min_words,
        min_length=config.min_length,
        max_length=config.max_length,
    )

    working = new_canvas(config.canvas_size)
    placed, unplaced = place_words(
        pool,
        working,
        max_passes=config.max_passes,
        drop_policy=config.drop_policy,
        min_words=config.min_words,
    )

    solution = build_solution(placed, working, unplaced, min_words=config.min_words)
    LOGGER.info(
        "Generated %dx%d puzzle with %d/%d words",
        solution.width, solution.height, len(placed), len(pool),
    )
    return solution
