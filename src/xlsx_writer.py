"""Export a generated puzzle's clue list and answer grid to an XLSX file."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from models import Clue, Solution

HEADER_FONT = Font(bold=True, size=12)
BLOCK_FILL = PatternFill(fill_type="solid", start_color="FF000000", end_color="FF000000")


def write_clues_xlsx(solution: Solution, output_path: str) -> None:
    """Write the puzzle to an Excel workbook.

    Sheet "Clues": ACROSS then DOWN sections, '1. Clue text' in column A,
    answer and length in B and C. Sheet "Grid": the answer key, one letter per
    cell with blocked cells filled black. If any pool words were dropped, a
    "Not placed" sheet lists them.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Clues"

    row = _write_section(ws, 1, "ACROSS", solution.across())
    row += 1  # blank separator
    _write_section(ws, row, "DOWN", solution.down())

    ws.column_dimensions["A"].width = 60
    ws.column_dimensions["B"].width = 15
    ws.column_dimensions["C"].width = 8

    _write_grid_sheet(wb.create_sheet(title="Grid"), solution)

    if solution.unplaced:
        ws2 = wb.create_sheet(title="Not placed")
        ws2.cell(row=1, column=1, value="Clue").font = HEADER_FONT
        ws2.cell(row=1, column=2, value="Answer").font = HEADER_FONT
        for i, entry in enumerate(solution.unplaced, start=2):
            ws2.cell(row=i, column=1, value=entry.clue_text)
            ws2.cell(row=i, column=2, value=entry.answer)
        ws2.column_dimensions["A"].width = 60
        ws2.column_dimensions["B"].width = 15

    wb.save(output_path)


def _write_section(ws, row: int, title: str, clues: list[Clue]) -> int:
    """Write a header plus one row per clue; return the next free row."""
    ws.cell(row=row, column=1, value=title).font = HEADER_FONT
    row += 1
    for clue in clues:
        ws.cell(row=row, column=1, value=f"{clue.number}. {clue.text}")
        ws.cell(row=row, column=2, value=clue.answer)
        ws.cell(row=row, column=3, value=clue.length)
        row += 1
    return row


def _write_grid_sheet(ws, solution: Solution) -> None:
    center = Alignment(horizontal="center", vertical="center")
    for r, letters in enumerate(solution.grid, start=1):
        for c, letter in enumerate(letters, start=1):
            cell = ws.cell(row=r, column=c)
            if letter is None:
                cell.fill = BLOCK_FILL
            else:
                cell.value = letter
                cell.alignment = center
    for c in range(1, solution.width + 1):
        ws.column_dimensions[get_column_letter(c)].width = 4
