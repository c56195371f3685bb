#!/usr/bin/env python3
"""CLI entry point for crossword generation.

Reads answer/clue pairs (CSV or XLSX) → places words → numbers the grid →
writes the puzzle JSON consumed by the web player, optionally with SVG grids
and an XLSX clue sheet alongside it.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from models import CrosswordError, Puzzle


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a crossword puzzle JSON from answer/clue pairs."
    )
    p.add_argument("input", help="CSV (answer,clue per line) or XLSX file")
    p.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output JSON path (default: input with .json extension)",
    )
    p.add_argument("--title", default="Crossword",
                   help='Puzzle title (default: "Crossword")')
    p.add_argument("--svg", action="store_true",
                   help="Also write puzzle and answer-key SVGs next to the JSON")
    p.add_argument("--clues-xlsx", action="store_true",
                   help="Also write an XLSX clue sheet next to the JSON")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    t0 = time.time()
    try:
        _run(args, t0)
    except CrosswordError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _run(args, t0: float) -> None:
    from entry_reader import read_entries
    from grid_placer import place_words
    from grid_builder import compile_puzzle
    from puzzle_serializer import write_puzzle_json

    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else input_path.with_suffix(".json")

    clues = read_entries(input_path)
    print(f"Read {len(clues)} valid clue entries", file=sys.stderr)

    result = place_words(clues)
    by_index = {clue.index: clue for clue in clues}
    disconnected = [by_index[i] for i in result.disconnected]
    for clue in disconnected:
        print(
            f"Warning: '{clue.answer}' shares no letter with the grid, "
            f"placed in a separate region",
            file=sys.stderr,
        )

    puzzle = compile_puzzle(result, clues, title=args.title)
    write_puzzle_json(puzzle, output_path)
    print(f"Output: {output_path}", file=sys.stderr)

    _output_extras(puzzle, output_path, args, disconnected)

    elapsed = time.time() - t0
    grid = puzzle.grid
    white_cells = sum(1 for row in grid.cells for cell in row if not cell.is_block)
    density = white_cells / (grid.rows * grid.cols) * 100

    print(
        f"Placed {len(result.placements)} words, "
        f"grid {grid.rows}x{grid.cols}, "
        f"density {density:.0f}%, "
        f"time {elapsed:.1f}s",
        file=sys.stderr,
    )


def _output_extras(puzzle: Puzzle, output_path: Path, args, disconnected) -> None:
    """Write the optional SVG grids and XLSX clue sheet beside the JSON."""
    stem = output_path.stem
    out_dir = output_path.parent

    if args.svg:
        from svg_renderer import render_puzzle_svg, render_answer_svg

        puzzle_svg_path = str(out_dir / f"{stem}_puzzle.svg")
        answer_svg_path = str(out_dir / f"{stem}_answer.svg")
        render_puzzle_svg(puzzle.grid, puzzle_svg_path)
        render_answer_svg(puzzle.grid, answer_svg_path)
        print(f"Output: {puzzle_svg_path}", file=sys.stderr)
        print(f"Output: {answer_svg_path}", file=sys.stderr)

    if args.clues_xlsx:
        from xlsx_writer import write_clues_xlsx

        xlsx_path = str(out_dir / f"{stem}_clues.xlsx")
        write_clues_xlsx(puzzle.across, puzzle.down, xlsx_path, disconnected=disconnected)
        print(f"Output: {xlsx_path}", file=sys.stderr)


if __name__ == "__main__":
    main()
