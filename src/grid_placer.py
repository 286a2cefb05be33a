"""Crossword word placement: centered seed word, then greedy best-intersection passes."""

from __future__ import annotations

from collections import namedtuple
from typing import Optional

from logger import get_logger
from models import Direction, DropPolicy, PlacedWord, UnplacedWordsError, WordEntry

LOGGER = get_logger(__name__)

Candidate = namedtuple("Candidate", ["row", "col", "direction", "intersections"])
WorkingGrid = list[list[Optional[str]]]

CANVAS_SIZE = 25
MAX_PASSES = 10


def new_canvas(size: int = CANVAS_SIZE) -> WorkingGrid:
    return [[None] * size for _ in range(size)]


def place_words(
    pool: list[WordEntry],
    working: WorkingGrid,
    max_passes: int = MAX_PASSES,
    drop_policy: DropPolicy = DropPolicy.LENIENT,
    min_words: int = 4,
) -> tuple[list[PlacedWord], list[WordEntry]]:
    """Seed the canvas with the first (longest) entry, then place the rest greedily.

    Returns (placed, unplaced). Under DropPolicy.STRICT any unplaced word
    raises UnplacedWordsError instead.
    """
    if not pool:
        return [], []

    placed = [place_seed(pool[0], working)]
    remaining = list(pool[1:])

    for pass_no in range(1, max_passes + 1):
        if not remaining:
            break
        still_unplaced: list[WordEntry] = []
        for entry in remaining:
            best = _best_candidate(entry.answer, placed, working)
            if best is None:
                still_unplaced.append(entry)
                continue
            placed.append(_commit(entry, best, working))
            LOGGER.debug(
                "Placed %s %s at (%d,%d) with %d intersection(s)",
                entry.answer, best.direction.value, best.row, best.col, best.intersections,
            )

        placed_this_pass = len(remaining) - len(still_unplaced)
        LOGGER.debug("Pass %d placed %d word(s), %d left", pass_no, placed_this_pass, len(still_unplaced))
        remaining = still_unplaced
        if placed_this_pass == 0:
            break

    if remaining:
        if drop_policy == DropPolicy.STRICT:
            raise UnplacedWordsError(remaining, len(placed), min_words)
        LOGGER.info("Dropping unplaceable words: %s", ", ".join(e.answer for e in remaining))

    return placed, remaining


def place_seed(entry: WordEntry, working: WorkingGrid) -> PlacedWord:
    """Write *entry* Across, centered on the canvas."""
    size = len(working)
    row = size // 2
    col = max(0, (size - len(entry.answer)) // 2)
    return _commit(entry, Candidate(row, col, Direction.ACROSS, 0), working)


# ── Candidate finding ─────────────────────────────────────────────────

def _best_candidate(
    answer: str, placed: list[PlacedWord], working: WorkingGrid,
) -> Candidate | None:
    """Enumerate every letter match against every placed word; keep the top scorer.

    Ties keep the first legal candidate found.
    """
    best: Candidate | None = None
    for other in placed:
        direction = other.direction.perpendicular
        dr, dc = direction.step
        for i, (r, c) in enumerate(other.cells()):
            for j, ch in enumerate(answer):
                if ch != other.answer[i]:
                    continue
                row, col = r - dr * j, c - dc * j
                if not can_place(answer, row, col, direction, working):
                    continue
                inters = count_intersections(answer, row, col, direction, working)
                if best is None or inters > best.intersections:
                    best = Candidate(row, col, direction, inters)
    return best


# ── Validation ────────────────────────────────────────────────────────

def can_place(
    answer: str, row: int, col: int, direction: Direction, working: WorkingGrid,
) -> bool:
    """Check bounds, end caps, letter agreement and perpendicular adjacency.

    Never mutates *working* and never raises for out-of-range anchors.
    A word laid along a same-direction word it fully contains (ARTS over ART)
    passes every check; the overlapped word then loses its end cap.
    """
    rows = len(working)
    cols = len(working[0]) if rows else 0
    length = len(answer)
    if length == 0 or rows == 0:
        return False

    dr, dc = direction.step
    end_r, end_c = row + dr * (length - 1), col + dc * (length - 1)
    if not (0 <= row < rows and 0 <= col < cols and 0 <= end_r < rows and 0 <= end_c < cols):
        return False

    def occupied(r: int, c: int) -> bool:
        return 0 <= r < rows and 0 <= c < cols and working[r][c] is not None

    # Cells just before the start and just after the end must be empty/edge
    if occupied(row - dr, col - dc) or occupied(end_r + dr, end_c + dc):
        return False

    pr, pc = direction.perpendicular.step
    for i, letter in enumerate(answer):
        r, c = row + dr * i, col + dc * i
        existing = working[r][c]
        if existing is not None:
            if existing != letter:
                return False
        elif occupied(r + pr, c + pc) or occupied(r - pr, c - pc):
            return False

    return True


# ── Grid manipulation ─────────────────────────────────────────────────

def count_intersections(
    answer: str, row: int, col: int, direction: Direction, working: WorkingGrid,
) -> int:
    dr, dc = direction.step
    return sum(1 for i in range(len(answer)) if working[row + dr * i][col + dc * i] is not None)


def _commit(entry: WordEntry, candidate: Candidate, working: WorkingGrid) -> PlacedWord:
    placed = PlacedWord(
        answer=entry.answer, clue_text=entry.clue_text,
        row=candidate.row, col=candidate.col, direction=candidate.direction,
    )
    for (r, c), letter in zip(placed.cells(), entry.answer):
        working[r][c] = letter
    return placed
