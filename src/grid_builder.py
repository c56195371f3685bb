"""Build the Grid model from placed words, assign cell numbers, build clue lists."""

from __future__ import annotations

from models import (
    CellType,
    ClueEntry,
    Coord,
    Direction,
    DuplicateStartError,
    Grid,
    MissingEntryError,
    NumberedClue,
    Placement,
    PlacementResult,
    Puzzle,
    UnusedEntriesError,
)


def compile_puzzle(result: PlacementResult, clues: list[ClueEntry], title: str = "Crossword") -> Puzzle:
    """Turn a placement result into a numbered grid with across/down clues."""
    grid = build_grid(result)
    number_grid(grid)
    across, down = build_clue_lists(grid, result, clues)
    return Puzzle(title=title, grid=grid, across=across, down=down)


def build_grid(result: PlacementResult) -> Grid:
    """Create a Grid sized to the placement bounds and write every letter."""
    bounds = result.bounds
    grid = Grid.create(bounds.rows, bounds.cols)

    for (r, c), letter in result.letters.items():
        cell = grid.cells[r - bounds.min_row][c - bounds.min_col]
        cell.cell_type = CellType.WHITE
        cell.letter = letter

    return grid


def number_grid(grid: Grid) -> None:
    """Scan L→R, T→B and assign sequential numbers where a word starts."""
    counter = 1
    for r in range(grid.rows):
        for c in range(grid.cols):
            if _starts_across(grid, r, c) or _starts_down(grid, r, c):
                grid.cells[r][c].number = counter
                counter += 1


def build_clue_lists(
    grid: Grid, result: PlacementResult, clues: list[ClueEntry],
) -> tuple[list[NumberedClue], list[NumberedClue]]:
    """Walk every numbered start, match it to its placed entry, return across/down.

    Raises MissingEntryError for a run no entry accounts for and
    UnusedEntriesError if any entry never becomes a clue.
    """
    by_index = {clue.index: clue for clue in clues}
    starts = _index_starts(result.placements, result.bounds.min_row, result.bounds.min_col)

    across: list[NumberedClue] = []
    down: list[NumberedClue] = []
    used: set[int] = set()

    for r in range(grid.rows):
        for c in range(grid.cols):
            number = grid.cells[r][c].number
            if number is None:
                continue
            for direction, starts_here, out in (
                (Direction.ACROSS, _starts_across, across),
                (Direction.DOWN, _starts_down, down),
            ):
                if not starts_here(grid, r, c):
                    continue
                entry_index = starts.get((r, c, direction))
                if entry_index is None:
                    raise MissingEntryError(
                        f"Missing {direction.value.lower()} entry for start ({r},{c})"
                    )
                entry = by_index[entry_index]
                run = _take_run(grid, r, c, direction)
                spelled = "".join(grid.cells[rr][cc].letter for rr, cc in run)
                if spelled != entry.answer:
                    raise MissingEntryError(
                        f"Run at ({r},{c}) {direction.value.lower()} spells "
                        f"'{spelled}', expected '{entry.answer}'"
                    )
                used.add(entry_index)
                out.append(NumberedClue(
                    number=number,
                    clue_text=entry.clue_text,
                    answer=entry.answer,
                    direction=direction,
                    cells=tuple(run),
                ))

    missing = [clue.answer for clue in clues if clue.index not in used]
    if missing:
        raise UnusedEntriesError(missing)

    return across, down


def _index_starts(
    placements: tuple[Placement, ...], min_row: int, min_col: int,
) -> dict[tuple[int, int, Direction], int]:
    """Map grid-relative (row, col, direction) starts to entry indices."""
    starts: dict[tuple[int, int, Direction], int] = {}
    for p in placements:
        key = (p.row - min_row, p.col - min_col, p.direction)
        if key in starts:
            raise DuplicateStartError(
                f"Duplicate start placement at ({key[0]},{key[1]}) {p.direction.value.lower()}"
            )
        starts[key] = p.entry_index
    return starts


def _take_run(grid: Grid, r: int, c: int, direction: Direction) -> list[Coord]:
    """Consecutive white cells from (r, c) along *direction*."""
    dr, dc = direction.step
    run: list[Coord] = []
    while grid.is_white(r, c):
        run.append((r, c))
        r += dr
        c += dc
    return run


def _starts_across(grid: Grid, r: int, c: int) -> bool:
    """Left is BLACK/edge AND right is WHITE."""
    return grid.is_white(r, c) and not grid.is_white(r, c - 1) and grid.is_white(r, c + 1)


def _starts_down(grid: Grid, r: int, c: int) -> bool:
    """Top is BLACK/edge AND bottom is WHITE."""
    return grid.is_white(r, c) and not grid.is_white(r - 1, c) and grid.is_white(r + 1, c)
