#!/usr/bin/env python3
"""CLI entry point: vocabulary workbook → crossword PDF, clue XLSX and SVGs."""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from generator import GeneratorConfig, generate
from grid_placer import MAX_PASSES
from logger import configure_logging
from models import CrosswordError, DropPolicy, Solution

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a vocabulary crossword from an XLSX word list."
    )
    p.add_argument("input", help="XLSX file with word / definition rows (one sheet per test)")
    p.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output PDF path (default: input with .pdf extension)",
    )
    p.add_argument("--sheet", default=None,
                   help="Worksheet to draw words from (default: first sheet)")
    p.add_argument("--title", default="CROSSWORD",
                   help='Title text (default: "CROSSWORD")')
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed (default: random)")
    p.add_argument("--max-passes", type=int, default=MAX_PASSES,
                   help=f"Greedy placement passes (default: {MAX_PASSES})")
    p.add_argument("--strict", action="store_true",
                   help="Fail instead of dropping words that cannot be placed")
    p.add_argument("--log-level", default="WARNING", type=str.upper,
                   choices=LOG_LEVELS,
                   help="Logging level (default: WARNING)")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(logging, args.log_level))

    seed = args.seed if args.seed is not None else random.randint(0, 2**31)
    t0 = time.time()

    try:
        config = GeneratorConfig(
            max_passes=args.max_passes,
            drop_policy=DropPolicy.STRICT if args.strict else DropPolicy.LENIENT,
        )
        _run(args, config, seed, t0)
    except (CrosswordError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _run(args, config: GeneratorConfig, seed: int, t0: float) -> None:
    from xlsx_reader import read_pairs

    input_path = Path(args.input)
    output_path = args.output or str(input_path.with_suffix(".pdf"))

    pairs = read_pairs(input_path, sheet=args.sheet)
    print(f"Read {len(pairs)} vocabulary entries (seed={seed})", file=sys.stderr)

    solution = generate(pairs, rng=random.Random(seed), config=config)
    _output_all(solution, args.title, output_path)

    elapsed = time.time() - t0
    print(
        f"Placed {len(solution.placed)} words "
        f"({len(solution.unplaced)} dropped), "
        f"grid {solution.width}x{solution.height}, "
        f"time {elapsed:.1f}s",
        file=sys.stderr,
    )


def _output_all(solution: Solution, title: str, output_path: str) -> None:
    """Write PDF, clue XLSX, puzzle SVG and answer SVG into an 'output' folder."""
    from pdf_renderer import render_pdf
    from svg_renderer import render_answer_svg, render_puzzle_svg
    from xlsx_writer import write_clues_xlsx

    stem = Path(output_path).stem
    out_dir = Path(output_path).parent / "output"
    out_dir.mkdir(exist_ok=True)

    pdf_path = str(out_dir / f"{stem}.pdf")
    xlsx_path = str(out_dir / f"{stem}_clues.xlsx")
    puzzle_svg_path = str(out_dir / f"{stem}_puzzle.svg")
    answer_svg_path = str(out_dir / f"{stem}_answer.svg")

    render_pdf(solution, title, pdf_path)
    write_clues_xlsx(solution, xlsx_path)
    render_puzzle_svg(solution, puzzle_svg_path)
    render_answer_svg(solution, answer_svg_path)

    for path in (pdf_path, xlsx_path, puzzle_svg_path, answer_svg_path):
        print(f"Output: {path}", file=sys.stderr)


if __name__ == "__main__":
    main()
