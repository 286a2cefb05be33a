"""Render a crossword Solution to a printable PDF using ReportLab.

Page 1: title banner, the blank grid centered below it, Across and Down clue
columns under the grid. Page 2: answer key.
"""

from __future__ import annotations

from dataclasses import dataclass
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus import Paragraph

from models import Clue, Solution

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36
SECTION_HEADER_H = 14.0


@dataclass
class LayoutParams:
    """All computed layout measurements."""

    page_w: float = PAGE_W
    page_h: float = PAGE_H
    margin: float = MARGIN
    usable_w: float = PAGE_W - 2 * MARGIN

    # Grid
    cols: int = 0
    rows: int = 0
    cell_size: float = 28.0
    grid_x: float = 0.0
    grid_y: float = 0.0  # top of grid in page coords
    number_font_size: float = 8.0

    # Title banner
    banner_h: float = 28.0
    banner_y: float = 0.0

    # Clues: Across in the left column, Down in the right
    clue_font_size: float = 10.0
    clue_leading: float = 12.0
    space_after: float = 2.0
    clue_zone_y: float = 0.0
    clue_gutter: float = 18.0
    clue_col_w: float = 0.0

    title: str = "CROSSWORD"


def render_pdf(solution: Solution, title: str, output_path: str) -> None:
    """Lay out, shrink clues until they fit, draw puzzle and answer-key pages."""
    from reportlab.pdfgen.canvas import Canvas

    layout = _compute_layout(solution, title)
    layout = _adaptive_fit(solution, layout)

    c = Canvas(output_path, pagesize=letter)

    _draw_title_banner(c, layout)
    _draw_grid(c, solution, layout, show_answers=False)
    _draw_clue_columns(c, solution, layout)
    c.showPage()

    _draw_answer_key_page(c, solution, layout)
    c.showPage()

    c.save()


def _compute_layout(solution: Solution, title: str) -> LayoutParams:
    lp = LayoutParams(cols=solution.width, rows=solution.height, title=title)

    # Largest cell that keeps the grid within 60% of the page width
    longest = max(solution.width, solution.height)
    lp.cell_size = min(32.0, (lp.usable_w * 0.6) / longest)
    lp.number_font_size = max(5.0, lp.cell_size * 0.28)

    _recompute_positions(lp)
    return lp


def _recompute_positions(lp: LayoutParams) -> None:
    lp.banner_y = lp.page_h - lp.margin - lp.banner_h

    grid_w = lp.cell_size * lp.cols
    lp.grid_x = (lp.page_w - grid_w) / 2
    lp.grid_y = lp.banner_y - 12

    lp.clue_zone_y = lp.grid_y - lp.cell_size * lp.rows - 16
    lp.clue_col_w = (lp.usable_w - lp.clue_gutter) / 2


def _adaptive_fit(solution: Solution, layout: LayoutParams) -> LayoutParams:
    """Shrink the clue font, then the grid, until both clue columns fit on page 1."""
    for _ in range(16):
        if _content_fits(solution, layout):
            return layout

        if layout.clue_font_size > 6.0:
            layout.clue_font_size -= 0.5
            layout.clue_leading = layout.clue_font_size + 2.0
            continue

        if layout.space_after > 0.5:
            layout.space_after = 0.5
            continue

        if layout.cell_size > 14:
            layout.cell_size -= 2
            layout.number_font_size = max(5.0, layout.cell_size * 0.28)
            _recompute_positions(layout)
            continue

        break

    return layout


def _content_fits(solution: Solution, layout: LayoutParams) -> bool:
    available = layout.clue_zone_y - layout.margin
    tallest = max(
        _column_height(solution.across(), layout),
        _column_height(solution.down(), layout),
    )
    return tallest <= available


def _column_height(clues: list[Clue], layout: LayoutParams) -> float:
    style = _clue_style(layout)
    height = SECTION_HEADER_H + 4
    for clue in clues:
        _, h = Paragraph(_clue_markup(clue), style).wrap(layout.clue_col_w, 10000)
        height += h + style.spaceAfter
    return height


def _clue_style(layout: LayoutParams) -> ParagraphStyle:
    return ParagraphStyle(
        "ClueStyle",
        fontName="Helvetica",
        fontSize=layout.clue_font_size,
        leading=layout.clue_leading,
        spaceAfter=layout.space_after,
    )


def _clue_markup(clue: Clue) -> str:
    """Format clue as ``<b>N.</b> text (len)`` with XML escaping."""
    return f"<b>{clue.number}.</b> {escape(clue.text)} ({clue.length})"


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_title_banner(c, layout: LayoutParams) -> None:
    """Black rect + white centered bold text."""
    x = layout.margin
    y = layout.banner_y
    w = layout.usable_w
    h = layout.banner_h

    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y, w, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(layout.title, "Helvetica-Bold", 16)
    c.drawString(x + (w - text_w) / 2, y + (h - 16) / 2 + 2, layout.title)


def _draw_grid(c, solution: Solution, layout: LayoutParams, show_answers: bool) -> None:
    """Draw boxed letter cells with their numbers; empty cells stay blank paper."""
    x0 = layout.grid_x
    y0 = layout.grid_y
    cs = layout.cell_size

    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(0.8)
    for r, letters in enumerate(solution.grid):
        for col, letter_ in enumerate(letters):
            if letter_ is None:
                continue
            cx = x0 + col * cs
            cy = y0 - (r + 1) * cs

            c.setFillColorRGB(1, 1, 1)
            c.rect(cx, cy, cs, cs, fill=1, stroke=1)

            number = solution.number_grid[r][col]
            if number is not None:
                c.setFillColorRGB(0, 0, 0)
                c.setFont("Helvetica-Bold", layout.number_font_size)
                c.drawString(cx + 1.5, cy + cs - layout.number_font_size - 1, str(number))

            if show_answers:
                c.setFillColorRGB(0, 0, 0)
                font_size = cs * 0.45
                c.setFont("Helvetica", font_size)
                lw = stringWidth(letter_, "Helvetica", font_size)
                c.drawString(cx + cs * 0.55 - lw / 2, cy + cs * 0.42 - font_size / 2, letter_)


def _draw_clue_columns(c, solution: Solution, layout: LayoutParams) -> None:
    style = _clue_style(layout)
    sections = (("ACROSS", solution.across()), ("DOWN", solution.down()))

    for i, (title, clues) in enumerate(sections):
        col_x = layout.margin + i * (layout.clue_col_w + layout.clue_gutter)
        y = _draw_section_header(c, title, col_x, layout.clue_zone_y, layout.clue_col_w) - 4
        for clue in clues:
            p = Paragraph(_clue_markup(clue), style)
            _, h = p.wrap(layout.clue_col_w, 10000)
            p.drawOn(c, col_x, y - h)
            y -= h + style.spaceAfter


def _draw_section_header(c, text: str, x: float, y: float, width: float) -> float:
    """Black rect + white bold text. Returns y at bottom of header."""
    h = SECTION_HEADER_H
    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y - h, width, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 9)
    c.drawString(x + 4, y - h + 3.5, text)

    return y - h


def _draw_answer_key_page(c, solution: Solution, layout: LayoutParams) -> None:
    ak_layout = LayoutParams(
        cols=layout.cols,
        rows=layout.rows,
        cell_size=layout.cell_size,
        number_font_size=layout.number_font_size,
        title="ANSWER KEY",
    )
    _recompute_positions(ak_layout)

    _draw_title_banner(c, ak_layout)
    _draw_grid(c, solution, ak_layout, show_answers=True)
