"""One solver's crossword session: generate, fill in, check, retry or redraw."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from enum import Enum

from generator import GeneratorConfig, generate
from logger import get_logger
from models import (
    AnswerGrid,
    CheckResult,
    Clue,
    CrosswordError,
    Direction,
    InsufficientWordsError,
    Solution,
)
from scorer import check_answers

LOGGER = get_logger(__name__)

CheckHook = Callable[[Solution, CheckResult], None]


class SessionState(Enum):
    GENERATING = "GENERATING"
    READY = "READY"
    SOLVING = "SOLVING"
    CHECKED = "CHECKED"
    FAILED = "FAILED"


class CrosswordSession:
    """Holds the frozen Solution and the solver's AnswerGrid.

    ``words`` is the word-list source; every new puzzle redraws its pool from
    it. ``on_check`` is called with (solution, result) after each check, e.g.
    to feed a review scheduler.
    """

    def __init__(
        self,
        words: Sequence[tuple[str, str]],
        rng: random.Random | None = None,
        config: GeneratorConfig | None = None,
        on_check: CheckHook | None = None,
    ) -> None:
        self.words = list(words)
        self.rng = rng or random.Random()
        self.config = config or GeneratorConfig()
        self.on_check = on_check

        self.state = SessionState.GENERATING
        self.solution: Solution | None = None
        self.answers: AnswerGrid | None = None
        self.result: CheckResult | None = None
        self.error: InsufficientWordsError | None = None

    def new_puzzle(self) -> Solution:
        """Generate a fresh puzzle. On failure the session is left FAILED and the error re-raised."""
        self.state = SessionState.GENERATING
        self.solution = None
        self.answers = None
        self.result = None
        self.error = None

        try:
            solution = generate(self.words, rng=self.rng, config=self.config)
        except InsufficientWordsError as exc:
            LOGGER.warning("Puzzle generation failed: %s", exc)
            self.state = SessionState.FAILED
            self.error = exc
            raise

        self.solution = solution
        self.answers = AnswerGrid.create(solution.width, solution.height)
        self.state = SessionState.READY
        return solution

    def set_cell(self, row: int, col: int, letter: str) -> None:
        """Write one letter. Ignored outside the grid, on empty cells, or once checked."""
        if self.state not in (SessionState.READY, SessionState.SOLVING):
            return
        if not self.answers.contains(row, col) or self.solution.grid[row][col] is None:
            return
        self.answers.set(row, col, letter)
        self.state = SessionState.SOLVING

    def check(self) -> CheckResult:
        """Score the answer grid and freeze it."""
        if self.state == SessionState.CHECKED:
            return self.result
        if self.solution is None:
            raise CrosswordError(f"No puzzle to check (session is {self.state.value})")

        self.result = check_answers(self.solution, self.answers)
        self.state = SessionState.CHECKED
        LOGGER.info("Checked puzzle: %d/%d correct (%d%%)",
                    self.result.correct, self.result.total, self.result.score)
        if self.on_check is not None:
            self.on_check(self.solution, self.result)
        return self.result

    def reset(self) -> None:
        """Clear every answer and return to solving the same puzzle."""
        if self.solution is None:
            return
        self.answers.clear()
        self.result = None
        self.state = SessionState.SOLVING

    def word_at(self, row: int, col: int, direction: Direction | None = None) -> Clue | None:
        """Return the clue whose answer covers (row, col), preferring *direction*."""
        if self.solution is None:
            return None
        hits = [clue for clue in self.solution.clues if _covers(clue, row, col)]
        if direction is not None:
            preferred = [clue for clue in hits if clue.direction == direction]
            hits = preferred or hits
        return hits[0] if hits else None


def _covers(clue: Clue, row: int, col: int) -> bool:
    if clue.direction == Direction.ACROSS:
        return row == clue.row and clue.col <= col < clue.col + clue.length
    return col == clue.col and clue.row <= row < clue.row + clue.length
