"""Tests for puzzle_serializer.py."""

import json
import os
import tempfile

from models import ClueEntry
from grid_builder import compile_puzzle
from grid_placer import place_words
from puzzle_serializer import puzzle_to_dict, write_puzzle_json


def _cat_ace_puzzle():
    clues = [ClueEntry(0, "Feline pet", "CAT"), ClueEntry(1, "Top card", "ACE")]
    return compile_puzzle(place_words(clues), clues, title="Pets")


def _build(words):
    clues = [ClueEntry(i, f"Clue for {w}", w) for i, w in enumerate(words)]
    return compile_puzzle(place_words(clues), clues)


class TestPuzzleToDict:
    def test_top_level_shape(self):
        data = puzzle_to_dict(_cat_ace_puzzle())
        assert list(data) == ["title", "rows", "cols", "grid", "clues"]
        assert data["title"] == "Pets"
        assert (data["rows"], data["cols"]) == (3, 3)
        assert set(data["clues"]) == {"across", "down"}

    def test_cat_ace_grid(self):
        data = puzzle_to_dict(_cat_ace_puzzle())
        grid = data["grid"]
        assert grid[0][0] == {"row": 0, "col": 0, "solution": "C", "isBlock": False, "number": 1}
        assert grid[0][1] == {"row": 0, "col": 1, "solution": "A", "isBlock": False, "number": 2}
        assert grid[0][2] == {"row": 0, "col": 2, "solution": "T", "isBlock": False}
        assert grid[1][0] == {"row": 1, "col": 0, "isBlock": True}
        assert grid[2][1]["solution"] == "E"

    def test_cat_ace_clues(self):
        data = puzzle_to_dict(_cat_ace_puzzle())
        assert data["clues"]["across"] == [{
            "number": 1,
            "text": "Feline pet",
            "cells": [{"row": 0, "col": 0}, {"row": 0, "col": 1}, {"row": 0, "col": 2}],
        }]
        assert data["clues"]["down"] == [{
            "number": 2,
            "text": "Top card",
            "cells": [{"row": 0, "col": 1}, {"row": 1, "col": 1}, {"row": 2, "col": 1}],
        }]

    def test_solutions_are_single_letters(self):
        data = puzzle_to_dict(_build(["ELEPHANT", "PRACTICE", "HONESTY", "CASTLE", "QUIZ"]))
        for row in data["grid"]:
            for cell in row:
                if not cell["isBlock"]:
                    assert len(cell["solution"]) == 1
                    assert "A" <= cell["solution"] <= "Z"
                else:
                    assert "solution" not in cell

    def test_clue_numbers_match_grid(self):
        data = puzzle_to_dict(_build(["ELEPHANT", "PRACTICE", "HONESTY", "CASTLE"]))
        for clue in data["clues"]["across"] + data["clues"]["down"]:
            start = clue["cells"][0]
            assert data["grid"][start["row"]][start["col"]]["number"] == clue["number"]

    def test_unique_starts(self):
        data = puzzle_to_dict(_build(["ELEPHANT", "PRACTICE", "HONESTY", "CASTLE", "TEA"]))
        starts = [("across", c["cells"][0]["row"], c["cells"][0]["col"]) for c in data["clues"]["across"]]
        starts += [("down", c["cells"][0]["row"], c["cells"][0]["col"]) for c in data["clues"]["down"]]
        assert len(starts) == len(set(starts))


class TestWritePuzzleJson:
    def test_round_trips_through_file(self):
        puzzle = _cat_ace_puzzle()
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "nested", "puzzle.json")
            write_puzzle_json(puzzle, path)
            with open(path, encoding="utf-8") as f:
                assert json.load(f) == puzzle_to_dict(puzzle)

    def test_byte_identical_on_rerun(self):
        words = ["ELEPHANT", "PRACTICE", "HONESTY", "CASTLE", "TEA", "XYZ"]
        with tempfile.TemporaryDirectory() as tmp:
            first = os.path.join(tmp, "a.json")
            second = os.path.join(tmp, "b.json")
            write_puzzle_json(_build(words), first)
            write_puzzle_json(_build(words), second)
            with open(first, "rb") as a, open(second, "rb") as b:
                assert a.read() == b.read()
