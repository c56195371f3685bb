"""Serialize a compiled Puzzle to the JSON artifact read by the web player."""

from __future__ import annotations

import json
from pathlib import Path

from models import NumberedClue, Puzzle


def puzzle_to_dict(puzzle: Puzzle) -> dict:
    """Return the puzzle as plain JSON-compatible data.

    Shape::

        {"title", "rows", "cols",
         "grid": [[{"row", "col", "solution", "isBlock", "number"?} | {"row", "col", "isBlock"}]],
         "clues": {"across": [{"number", "text", "cells": [{"row", "col"}]}], "down": [...]}}
    """
    grid = puzzle.grid
    rows = []
    for r in range(grid.rows):
        row = []
        for cell in grid.cells[r]:
            if cell.is_block:
                row.append({"row": cell.row, "col": cell.col, "isBlock": True})
                continue
            data = {"row": cell.row, "col": cell.col, "solution": cell.letter, "isBlock": False}
            if cell.number is not None:
                data["number"] = cell.number
            row.append(data)
        rows.append(row)

    return {
        "title": puzzle.title,
        "rows": grid.rows,
        "cols": grid.cols,
        "grid": rows,
        "clues": {
            "across": [_clue_to_dict(clue) for clue in puzzle.across],
            "down": [_clue_to_dict(clue) for clue in puzzle.down],
        },
    }


def write_puzzle_json(puzzle: Puzzle, output_path: str | Path) -> None:
    """Write the puzzle JSON (2-space indent), creating parent folders."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(puzzle_to_dict(puzzle), f, indent=2, ensure_ascii=False)
        f.write("\n")


def _clue_to_dict(clue: NumberedClue) -> dict:
    return {
        "number": clue.number,
        "text": clue.clue_text,
        "cells": [{"row": r, "col": c} for r, c in clue.cells],
    }
