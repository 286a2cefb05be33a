"""Read a vocabulary workbook: one worksheet per test, rows of word / definition / example."""

from __future__ import annotations

from pathlib import Path

import openpyxl

from logger import get_logger
from models import CrosswordError
from vocabulary import VocabItem, VocabularyPart, VocabularyTest

LOGGER = get_logger(__name__)

HEADER_WORDS = {"word", "term", "vocabulary", "answer"}


def read_vocabulary(path: str | Path, part_id: int = 1) -> VocabularyPart:
    """Open *path* and return a VocabularyPart with one test per non-empty sheet."""
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")

    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    tests: list[VocabularyTest] = []
    try:
        for index, ws in enumerate(wb.worksheets, start=1):
            items = _read_items(ws)
            if not items:
                LOGGER.info("Sheet %r has no vocabulary rows, skipping", ws.title)
                continue
            tests.append(VocabularyTest(id=index, title=ws.title, words=items))
    finally:
        wb.close()

    if not tests:
        raise CrosswordError(f"No vocabulary rows found in {path}")

    LOGGER.info("Loaded %d test(s) from %s", len(tests), path)
    return VocabularyPart(id=part_id, title=path.stem, tests=tests)


def read_pairs(path: str | Path, sheet: str | None = None) -> list[tuple[str, str]]:
    """Return (word, definition) pairs from one sheet (default: the first)."""
    part = read_vocabulary(path)
    if sheet is None:
        return part.tests[0].pairs()
    for test in part.tests:
        if test.title == sheet:
            return test.pairs()
    raise CrosswordError(f"Sheet not found: {sheet}")


def _read_items(sheet) -> list[VocabItem]:
    first_row = _detect_first_data_row(sheet)
    items: list[VocabItem] = []
    seen: set[str] = set()

    for row in sheet.iter_rows(min_row=first_row, max_col=3, values_only=True):
        row = tuple(row) + (None,) * (3 - len(row))
        word = _cell_text(row[0])
        definition = _cell_text(row[1])
        if not word or not definition:
            continue
        key = word.lower()
        if key in seen:
            LOGGER.warning("Duplicate word %r in sheet %r, skipping", word, sheet.title)
            continue
        seen.add(key)
        items.append(VocabItem(word=word, definition=definition, example=_cell_text(row[2])))

    return items


def _detect_first_data_row(sheet) -> int:
    """Return the 1-based row where data starts.

    Only the first non-empty row can be a header (column A reads 'word' etc.);
    later rows are always data, even if the word itself is 'term' or 'answer'.
    """
    rows = sheet.iter_rows(min_row=1, max_row=20, max_col=1, values_only=True)
    for index, row in enumerate(rows, start=1):
        text = _cell_text(row[0] if row else None)
        if not text:
            continue
        return index + 1 if text.lower() in HEADER_WORDS else index
    return 1


def _cell_text(value) -> str:
    return str(value).strip() if value is not None else ""
