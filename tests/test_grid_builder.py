"""Tests for grid_builder.py."""

import pytest

from grid_builder import assign_clues, bounding_box, build_solution, trim_grid
from grid_placer import new_canvas
from models import Direction, InsufficientWordsError, PlacedWord, WordEntry


def _make_placed(answer, row, col, direction):
    return PlacedWord(answer=answer, clue_text=f"Clue for {answer}",
                      row=row, col=col, direction=direction)


def _four_words():
    """CAT/CAR/ART/TAR as the greedy placer lays them out on a 25x25 canvas."""
    placed = [
        _make_placed("CAT", 12, 11, Direction.ACROSS),
        _make_placed("CAR", 12, 11, Direction.DOWN),
        _make_placed("ART", 10, 13, Direction.DOWN),
        _make_placed("TAR", 14, 9, Direction.ACROSS),
    ]
    working = new_canvas(25)
    for p in placed:
        for (r, c), letter in zip(p.cells(), p.answer):
            working[r][c] = letter
    return placed, working


class TestBoundingBox:
    def test_accounts_for_length_and_direction(self):
        placed, _ = _four_words()
        assert bounding_box(placed) == (10, 9, 14, 13)


class TestTrimGrid:
    def test_size_includes_margin(self):
        placed, working = _four_words()
        grid, _ = trim_grid(placed, working)
        assert len(grid) == 7
        assert all(len(row) == 7 for row in grid)

    def test_letters_copied(self):
        placed, working = _four_words()
        grid, _ = trim_grid(placed, working)
        rendered = ["".join(letter or "." for letter in row) for row in grid]
        assert rendered == [
            ".......",
            ".....A.",
            ".....R.",
            "...CAT.",
            "...A...",
            ".TAR...",
            ".......",
        ]

    def test_coordinates_translated(self):
        placed, working = _four_words()
        _, moved = trim_grid(placed, working)
        assert [(p.answer, p.row, p.col, p.direction) for p in moved] == [
            ("CAT", 3, 3, Direction.ACROSS),
            ("CAR", 3, 3, Direction.DOWN),
            ("ART", 1, 5, Direction.DOWN),
            ("TAR", 5, 1, Direction.ACROSS),
        ]
        assert moved[0].clue_text == "Clue for CAT"

    def test_margin_is_exactly_one(self):
        placed, working = _four_words()
        grid, _ = trim_grid(placed, working)
        assert all(letter is None for letter in grid[0])
        assert all(letter is None for letter in grid[-1])
        assert all(row[0] is None and row[-1] is None for row in grid)
        assert any(letter is not None for letter in grid[1])
        assert any(letter is not None for letter in grid[-2])
        assert any(row[1] is not None for row in grid)
        assert any(row[-2] is not None for row in grid)

    def test_too_few_words_raises(self):
        placed, working = _four_words()
        with pytest.raises(InsufficientWordsError, match="after placement"):
            trim_grid(placed[:3], working)


class TestAssignClues:
    def test_shared_start_shares_number(self):
        placed = [
            _make_placed("CAT", 3, 3, Direction.ACROSS),
            _make_placed("CAR", 3, 3, Direction.DOWN),
            _make_placed("ART", 1, 5, Direction.DOWN),
            _make_placed("TAR", 5, 1, Direction.ACROSS),
        ]
        clues, number_grid = assign_clues(placed, 7, 7)
        assert [(c.number, c.direction, c.answer) for c in clues] == [
            (1, Direction.DOWN, "ART"),
            (2, Direction.ACROSS, "CAT"),
            (2, Direction.DOWN, "CAR"),
            (3, Direction.ACROSS, "TAR"),
        ]
        assert number_grid[1][5] == 1
        assert number_grid[3][3] == 2
        assert number_grid[5][1] == 3
        assert sum(1 for row in number_grid for n in row if n is not None) == 3

    def test_reading_order(self):
        placed = [
            _make_placed("ZED", 4, 0, Direction.ACROSS),
            _make_placed("ONE", 0, 6, Direction.DOWN),
            _make_placed("TWO", 0, 2, Direction.DOWN),
        ]
        clues, _ = assign_clues(placed, 8, 8)
        assert [(c.answer, c.number) for c in clues] == [("TWO", 1), ("ONE", 2), ("ZED", 3)]

    def test_clue_fields(self):
        clues, _ = assign_clues([_make_placed("HELLO", 2, 1, Direction.ACROSS)], 8, 5)
        clue = clues[0]
        assert clue.text == "Clue for HELLO"
        assert clue.length == 5
        assert (clue.row, clue.col) == (2, 1)


class TestBuildSolution:
    def test_frozen_solution(self):
        placed, working = _four_words()
        unplaced = [WordEntry("XYZ", "unplaceable")]
        solution = build_solution(placed, working, unplaced)
        assert (solution.width, solution.height) == (7, 7)
        assert isinstance(solution.grid, tuple)
        assert isinstance(solution.grid[0], tuple)
        assert solution.letter_count() == 9
        assert len(solution.clues) == 4
        assert [e.answer for e in solution.unplaced] == ["XYZ"]
        assert [c.answer for c in solution.across()] == ["CAT", "TAR"]
        assert [c.answer for c in solution.down()] == ["ART", "CAR"]
        with pytest.raises(AttributeError):
            solution.width = 3
