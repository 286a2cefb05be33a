"""Tests for pdf_renderer.py."""

import os
import re
import tempfile

from grid_builder import build_solution
from grid_placer import new_canvas, place_words
from models import Clue, Direction, Solution, WordEntry
from pdf_renderer import render_pdf, _clue_markup, _compute_layout, _adaptive_fit


def _make_solution():
    entries = [
        WordEntry("CAT", "Feline pet"),
        WordEntry("CAR", "Automobile"),
        WordEntry("ART", "Creative work"),
        WordEntry("TAR", "Dark substance"),
    ]
    working = new_canvas(25)
    placed, unplaced = place_words(entries, working)
    return build_solution(placed, working, unplaced)


def _blank_solution(size, clues=()):
    grid = tuple((None,) * size for _ in range(size))
    return Solution(grid=grid, width=size, height=size, clues=tuple(clues), number_grid=grid)


def _render(solution):
    with tempfile.NamedTemporaryFile(suffix=".pdf", delete=False) as f:
        path = f.name
    render_pdf(solution, "TEST", path)
    return path


class TestRenderPdf:
    def test_creates_valid_pdf(self):
        path = _render(_make_solution())
        try:
            with open(path, "rb") as f:
                assert f.read(8) == b"%PDF-1.4"
        finally:
            os.unlink(path)

    def test_two_pages(self):
        path = _render(_make_solution())
        try:
            with open(path, "rb") as f:
                content = f.read()
            pages = len(re.findall(rb'/Type\s*/Page[^s]', content))
            assert pages == 2
        finally:
            os.unlink(path)

    def test_page_size(self):
        path = _render(_make_solution())
        try:
            with open(path, "rb") as f:
                content = f.read()
            assert b"612" in content
            assert b"792" in content
        finally:
            os.unlink(path)


class TestComputeLayout:
    def test_small_grid_capped(self):
        layout = _compute_layout(_blank_solution(7), "CROSSWORD")
        assert layout.cell_size == 32.0
        assert (layout.cols, layout.rows) == (7, 7)

    def test_large_grid_scaled(self):
        layout = _compute_layout(_blank_solution(25), "CROSSWORD")
        assert layout.cell_size == (612 - 72) * 0.6 / 25

    def test_grid_centered(self):
        layout = _compute_layout(_blank_solution(7), "CROSSWORD")
        assert layout.grid_x == (612 - 32.0 * 7) / 2


class TestAdaptiveFit:
    def test_no_change_when_fits(self):
        layout = _compute_layout(_make_solution(), "TEST")
        layout = _adaptive_fit(_make_solution(), layout)
        assert layout.clue_font_size == 10.0
        assert layout.cell_size == 32.0

    def test_shrinks_for_long_clues(self):
        text = "A very long clue that keeps going so that it wraps over several lines " * 3
        clues = [
            Clue(number=i, direction=Direction.ACROSS, text=text, answer="WORD",
                 length=4, row=0, col=0)
            for i in range(1, 41)
        ]
        solution = _blank_solution(7, clues)
        layout = _adaptive_fit(solution, _compute_layout(solution, "TEST"))
        assert layout.clue_font_size == 6.0
        assert layout.cell_size < 32.0


class TestClueMarkup:
    def test_escapes_and_length(self):
        clue = Clue(number=4, direction=Direction.DOWN, text="Salt & pepper", answer="SPICE",
                    length=5, row=0, col=0)
        assert _clue_markup(clue) == "<b>4.</b> Salt &amp; pepper (5)"
