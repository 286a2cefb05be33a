"""Trim the working canvas to the placed words, number the starts, build the Solution."""

from __future__ import annotations

from grid_placer import WorkingGrid
from models import (
    Clue,
    InsufficientWordsError,
    Letter,
    PlacedWord,
    Solution,
    WordEntry,
)

MARGIN = 1


def build_solution(
    placed: list[PlacedWord],
    working: WorkingGrid,
    unplaced: list[WordEntry] | None = None,
    min_words: int = 4,
) -> Solution:
    """Trim, number and freeze the result of a placement run."""
    grid, moved = trim_grid(placed, working, min_words)
    height, width = len(grid), len(grid[0])
    clues, number_grid = assign_clues(moved, width, height)
    return Solution(
        grid=tuple(tuple(row) for row in grid),
        width=width,
        height=height,
        clues=tuple(clues),
        number_grid=tuple(tuple(row) for row in number_grid),
        placed=tuple(moved),
        unplaced=tuple(unplaced or ()),
    )


def bounding_box(placed: list[PlacedWord]) -> tuple[int, int, int, int]:
    """Return (min_row, min_col, max_row, max_col) over every placed letter."""
    cells = [cell for entry in placed for cell in entry.cells()]
    rows = [r for r, _ in cells]
    cols = [c for _, c in cells]
    return min(rows), min(cols), max(rows), max(cols)


def trim_grid(
    placed: list[PlacedWord], working: WorkingGrid, min_words: int = 4,
) -> tuple[list[list[Letter]], list[PlacedWord]]:
    """Copy the occupied region plus a one-cell margin out of *working*.

    Returns the trimmed rows and the placed words translated into them.
    Raises InsufficientWordsError if fewer than *min_words* were placed.
    """
    if len(placed) < min_words:
        raise InsufficientWordsError(len(placed), min_words, stage="placement")

    min_r, min_c, max_r, max_c = bounding_box(placed)
    height = max_r - min_r + 1 + 2 * MARGIN
    width = max_c - min_c + 1 + 2 * MARGIN
    grid: list[list[Letter]] = [[None] * width for _ in range(height)]

    for r in range(min_r, max_r + 1):
        for c in range(min_c, max_c + 1):
            grid[r - min_r + MARGIN][c - min_c + MARGIN] = working[r][c]

    moved = [
        PlacedWord(
            answer=p.answer, clue_text=p.clue_text,
            row=p.row - min_r + MARGIN, col=p.col - min_c + MARGIN,
            direction=p.direction,
        )
        for p in placed
    ]
    return grid, moved


def assign_clues(
    placed: list[PlacedWord], width: int, height: int,
) -> tuple[list[Clue], list[list[int | None]]]:
    """Scan starts top-to-bottom, left-to-right and assign sequential numbers.

    A cell that starts both an Across and a Down word gets a single number.
    """
    number_grid: list[list[int | None]] = [[None] * width for _ in range(height)]
    clues: list[Clue] = []
    counter = 1

    for entry in sorted(placed, key=lambda p: (p.row, p.col)):
        number = number_grid[entry.row][entry.col]
        if number is None:
            number = counter
            number_grid[entry.row][entry.col] = number
            counter += 1
        clues.append(Clue(
            number=number,
            direction=entry.direction,
            text=entry.clue_text,
            answer=entry.answer,
            length=len(entry.answer),
            row=entry.row,
            col=entry.col,
        ))

    return clues, number_grid
