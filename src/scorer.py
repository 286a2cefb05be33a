"""Compare a solver's answer grid with the solution."""

from __future__ import annotations

import math

from models import AnswerGrid, CheckResult, Solution


def check_answers(solution: Solution, answers: AnswerGrid) -> CheckResult:
    """Score *answers* cell by cell; blank cells count as wrong."""
    if (answers.width, answers.height) != (solution.width, solution.height):
        raise ValueError(
            f"Answer grid is {answers.width}x{answers.height}, "
            f"solution is {solution.width}x{solution.height}"
        )

    correct = 0
    total = 0
    per_cell: list[tuple[bool | None, ...]] = []
    for r, row in enumerate(solution.grid):
        flags: list[bool | None] = []
        for c, letter in enumerate(row):
            if letter is None:
                flags.append(None)
                continue
            total += 1
            ok = answers.get(r, c) == letter
            correct += ok
            flags.append(ok)
        per_cell.append(tuple(flags))

    return CheckResult(
        score=percent(correct, total),
        correct=correct,
        total=total,
        per_cell=tuple(per_cell),
    )


def percent(correct: int, total: int) -> int:
    """Whole-number percentage, halves rounded up."""
    if total == 0:
        return 0
    return math.floor(100 * correct / total + 0.5)
