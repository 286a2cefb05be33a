"""Integration tests: end-to-end XLSX → PDF, clue XLSX and SVGs."""

import os
import random
import tempfile

import openpyxl
import pytest

import crossword_generator
from crossword_generator import main

FOUR_WORDS = [
    ("Word", "Definition"),
    ("cat", "Feline pet"),
    ("car", "Automobile"),
    ("art", "Creative work"),
    ("tar", "Dark substance"),
]


class _InOrder(random.Random):
    """Random source whose shuffle keeps the input order."""

    def shuffle(self, x):
        pass


def _write_workbook(directory, rows, name="words.xlsx"):
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Unit 1"
    for row in rows:
        ws.append(row)
    path = os.path.join(directory, name)
    wb.save(path)
    return path


@pytest.fixture
def in_order(monkeypatch):
    monkeypatch.setattr(crossword_generator.random, "Random", _InOrder)


@pytest.mark.slow
class TestEndToEnd:
    def test_xlsx_to_outputs(self, in_order, capsys):
        """Full pipeline: workbook → PDF, clue workbook and both SVGs."""
        with tempfile.TemporaryDirectory() as tmp:
            source = _write_workbook(tmp, FOUR_WORDS)
            main([source, os.path.join(tmp, "puzzle.pdf"), "--seed", "42"])

            out_dir = os.path.join(tmp, "output")
            for name in ("puzzle.pdf", "puzzle_clues.xlsx",
                         "puzzle_puzzle.svg", "puzzle_answer.svg"):
                assert os.path.exists(os.path.join(out_dir, name))

            with open(os.path.join(out_dir, "puzzle.pdf"), "rb") as f:
                assert f.read(5) == b"%PDF-"
            assert os.path.getsize(os.path.join(out_dir, "puzzle.pdf")) > 1000

        err = capsys.readouterr().err
        assert "Read 4 vocabulary entries (seed=42)" in err
        assert "Placed 4 words (0 dropped), grid 7x7" in err

    def test_default_output_name(self, in_order):
        """Without an output path, files are named after the input workbook."""
        with tempfile.TemporaryDirectory() as tmp:
            source = _write_workbook(tmp, FOUR_WORDS, name="unit1.xlsx")
            main([source, "--seed", "1"])
            assert os.path.exists(os.path.join(tmp, "output", "unit1.pdf"))

    def test_too_few_words(self, capsys):
        """Three usable words exit with status 1 and write nothing."""
        with tempfile.TemporaryDirectory() as tmp:
            source = _write_workbook(tmp, FOUR_WORDS[:4])
            with pytest.raises(SystemExit) as exc:
                main([source, os.path.join(tmp, "puzzle.pdf"), "--seed", "42"])
            assert exc.value.code == 1
            assert not os.path.exists(os.path.join(tmp, "output"))
        assert "Error: Could not build a puzzle" in capsys.readouterr().err

    def test_missing_file(self, capsys):
        """A missing workbook is reported on stderr."""
        with pytest.raises(SystemExit):
            main(["does_not_exist.xlsx", "--seed", "42"])
        assert "File not found" in capsys.readouterr().err

    def test_unknown_sheet(self, capsys):
        """An unknown --sheet name is reported on stderr."""
        with tempfile.TemporaryDirectory() as tmp:
            source = _write_workbook(tmp, FOUR_WORDS)
            with pytest.raises(SystemExit):
                main([source, "--sheet", "Unit 7", "--seed", "42"])
        assert "Sheet not found: Unit 7" in capsys.readouterr().err


class TestArguments:
    def test_unknown_log_level_rejected(self, capsys):
        """argparse rejects log levels outside the supported list."""
        with pytest.raises(SystemExit) as exc:
            main(["words.xlsx", "--log-level", "LOUD"])
        assert exc.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_log_level_case_insensitive(self, capsys):
        """Lower-case level names are accepted."""
        with pytest.raises(SystemExit) as exc:
            main(["does_not_exist.xlsx", "--log-level", "debug"])
        assert exc.value.code == 1
        assert "File not found" in capsys.readouterr().err
