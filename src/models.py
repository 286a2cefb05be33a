"""Data models for the vocabulary crossword."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

Letter = str | None


class Direction(Enum):
    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> tuple[int, int]:
        """(row delta, col delta) between consecutive letters."""
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular(self) -> Direction:
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


class DropPolicy(Enum):
    """What to do with pool words the greedy placer could not fit."""

    LENIENT = "LENIENT"
    STRICT = "STRICT"


@dataclass(frozen=True)
class WordEntry:
    """A candidate answer with its clue. ``answer`` is uppercase, alpha-only."""

    answer: str
    clue_text: str


@dataclass(frozen=True)
class PlacedWord(WordEntry):
    """A WordEntry anchored on a grid at (row, col) of its first letter."""

    row: int = 0
    col: int = 0
    direction: Direction = Direction.ACROSS

    def cells(self) -> list[tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(len(self.answer))]


@dataclass(frozen=True)
class Clue:
    """A numbered clue as shown to the solver."""

    number: int
    direction: Direction
    text: str
    answer: str
    length: int
    row: int
    col: int


@dataclass(frozen=True)
class Solution:
    """A finished puzzle. Immutable for the life of a solving session."""

    grid: tuple[tuple[Letter, ...], ...]
    width: int
    height: int
    clues: tuple[Clue, ...]
    number_grid: tuple[tuple[int | None, ...], ...]
    placed: tuple[PlacedWord, ...] = ()
    unplaced: tuple[WordEntry, ...] = ()

    def across(self) -> list[Clue]:
        return sorted((c for c in self.clues if c.direction == Direction.ACROSS),
                      key=lambda c: c.number)

    def down(self) -> list[Clue]:
        return sorted((c for c in self.clues if c.direction == Direction.DOWN),
                      key=lambda c: c.number)

    def letter_count(self) -> int:
        return sum(1 for row in self.grid for letter in row if letter is not None)


@dataclass
class AnswerGrid:
    """The solver's mutable grid. ``""`` marks an unattempted cell."""

    width: int
    height: int
    cells: list[list[str]] = field(default_factory=list)

    @classmethod
    def create(cls, width: int, height: int) -> AnswerGrid:
        """Create an all-blank answer grid."""
        cells = [[""] * width for _ in range(height)]
        return cls(width=width, height=height, cells=cells)

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def set(self, row: int, col: int, letter: str) -> None:
        """Store the first character of *letter*, uppercased. Out of range is a no-op."""
        if not self.contains(row, col):
            return
        self.cells[row][col] = (letter or "")[:1].upper()

    def clear(self) -> None:
        for row in self.cells:
            row[:] = [""] * self.width


@dataclass(frozen=True)
class CheckResult:
    """Outcome of comparing an AnswerGrid with a Solution."""

    score: int
    correct: int
    total: int
    per_cell: tuple[tuple[bool | None, ...], ...]


class CrosswordError(Exception):
    """Base error for crossword generation and solving."""


class InsufficientWordsError(CrosswordError):
    """Too few usable words to build a puzzle."""

    def __init__(self, count: int, required: int, stage: str = "filtering") -> None:
        self.count = count
        self.required = required
        self.stage = stage
        super().__init__(
            f"Could not build a puzzle from these words: {count} usable after "
            f"{stage} (minimum {required} required)"
        )


class UnplacedWordsError(InsufficientWordsError):
    """Raised under the strict drop policy when pool words could not be placed."""

    def __init__(self, unplaced: list[WordEntry], placed_count: int, required: int) -> None:
        self.unplaced = list(unplaced)
        super().__init__(placed_count, required, stage="placement")
        names = ", ".join(e.answer for e in self.unplaced)
        self.args = (f"Could not place {len(self.unplaced)} word(s): {names}",)
