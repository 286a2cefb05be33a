"""Render a crossword Solution as standalone SVG."""

from __future__ import annotations

from models import Solution


def render_svg(
    solution: Solution,
    output_path: str,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> None:
    """Write the grid to an SVG file. Empty cells are left transparent."""
    if cell_size is None:
        cell_size = _default_cell_size(max(solution.width, solution.height))

    number_font = cell_size / 3
    letter_font = cell_size * 0.45
    width = cell_size * solution.width
    height = cell_size * solution.height

    parts: list[str] = []
    parts.append(
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">\n'
    )

    for r in range(solution.height):
        for c in range(solution.width):
            letter = solution.grid[r][c]
            if letter is None:
                continue
            x = c * cell_size
            y = r * cell_size
            parts.append(
                f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                f'height="{cell_size}" fill="white" '
                f'stroke="black" stroke-width="1"/>\n'
            )

            number = solution.number_grid[r][c]
            if number is not None:
                parts.append(
                    f'  <text x="{x + 1.5}" y="{y + number_font + 1}" '
                    f'font-family="Helvetica, Arial, sans-serif" '
                    f'font-weight="bold" font-size="{number_font}" '
                    f'fill="black">{number}</text>\n'
                )

            if show_answers:
                parts.append(
                    f'  <text x="{x + cell_size * 0.55}" y="{y + cell_size * 0.58}" '
                    f'text-anchor="middle" dominant-baseline="central" '
                    f'font-family="Helvetica, Arial, sans-serif" '
                    f'font-size="{letter_font}" '
                    f'fill="black">{letter}</text>\n'
                )

    parts.append('</svg>\n')

    with open(output_path, 'w', encoding='utf-8') as f:
        f.writelines(parts)


def render_puzzle_svg(solution: Solution, output_path: str) -> None:
    """Render the blank puzzle (numbers, no letters) to SVG."""
    render_svg(solution, output_path, show_answers=False)


def render_answer_svg(solution: Solution, output_path: str) -> None:
    """Render the answer key (with letters) to SVG."""
    render_svg(solution, output_path, show_answers=True)


def _default_cell_size(longest_side: int) -> float:
    if longest_side <= 9:
        return 36.0
    elif longest_side <= 15:
        return 28.0
    else:
        return 22.0
