"""Crossword word placement: deterministic greedy fill on an unbounded grid.

Words are placed longest first. Each new word is put at the position that
crosses the most existing letters while keeping the bounding box small and
square. A word that cannot cross anything is parked below the current grid.
"""

from __future__ import annotations

from collections import namedtuple
from types import MappingProxyType

from models import (
    Bounds,
    ClueEntry,
    Coord,
    CrosswordError,
    Direction,
    Placement,
    PlacementConflictError,
    PlacementResult,
)

Candidate = namedtuple("Candidate", ["row", "col", "direction", "intersections", "score", "bounds"])
LetterMap = dict[Coord, str]

INTERSECTION_WEIGHT = 1000
ASPECT_WEIGHT = 5
FALLBACK_ROW_GAP = 2


def place_words(clues: list[ClueEntry]) -> PlacementResult:
    """Place every clue's answer and return the frozen letter map.

    Raises CrosswordError if *clues* is empty.
    """
    if not clues:
        raise CrosswordError("No clue entries to place")

    # Longest first; equal lengths keep input order
    ordered = sorted(clues, key=lambda c: (-len(c.answer), c.index))

    letters: LetterMap = {}
    placements: list[Placement] = []
    disconnected: list[int] = []

    seed = ordered[0]
    bounds = _place_word(seed, 0, 0, Direction.ACROSS, letters, placements, Bounds())

    for clue in ordered[1:]:
        best = _best_placement(clue.answer, letters, bounds)
        if best is not None:
            bounds = _place_word(clue, best.row, best.col, best.direction,
                                 letters, placements, bounds)
            continue

        # No shared letter: start a separate region below everything placed
        bounds = _place_word(clue, bounds.max_row + FALLBACK_ROW_GAP, bounds.min_col,
                             Direction.ACROSS, letters, placements, bounds)
        disconnected.append(clue.index)

    return PlacementResult(
        letters=MappingProxyType(letters),
        placements=tuple(placements),
        bounds=bounds,
        disconnected=tuple(disconnected),
    )


# ── Candidate search ─────────────────────────────────────────────────

def _best_placement(answer: str, letters: LetterMap, bounds: Bounds) -> Candidate | None:
    """Highest-scoring valid placement that crosses an existing letter.

    Ties keep the first candidate found: word index ascending, then grid
    cells in insertion order, ACROSS before DOWN.
    """
    best: Candidate | None = None
    existing = list(letters.items())

    for i, ch in enumerate(answer):
        for (r, c), letter in existing:
            if letter != ch:
                continue
            for direction in (Direction.ACROSS, Direction.DOWN):
                dr, dc = direction.step
                cand = _can_place(answer, r - dr * i, c - dc * i, direction, letters, bounds)
                if cand is not None and (best is None or cand.score > best.score):
                    best = cand
    return best


def _can_place(
    answer: str, row: int, col: int, direction: Direction,
    letters: LetterMap, bounds: Bounds,
) -> Candidate | None:
    """Validate a placement against the current grid and score it.

    Returns None when the word would merge with a neighbour, conflict with an
    existing letter, touch a parallel word, or float free of the grid.
    """
    length = len(answer)
    dr, dc = direction.step

    # Cells just before the start and just after the end must be empty
    if (row - dr, col - dc) in letters:
        return None
    if (row + dr * length, col + dc * length) in letters:
        return None

    # Perpendicular offsets
    pr, pc = dc, dr

    intersections = 0
    new_bounds = bounds
    for i, ch in enumerate(answer):
        r = row + dr * i
        c = col + dc * i
        existing = letters.get((r, c))

        if existing is not None:
            if existing != ch:
                return None
            intersections += 1
        elif (r + pr, c + pc) in letters or (r - pr, c - pc) in letters:
            return None

        new_bounds = new_bounds.widen(r, c)

    if letters and intersections == 0:
        return None

    return Candidate(row, col, direction, intersections,
                     _score(intersections, new_bounds), new_bounds)


def _score(intersections: int, bounds: Bounds) -> int:
    """Crossings dominate; then smaller and squarer bounding boxes win."""
    aspect_penalty = abs(bounds.cols - bounds.rows)
    return intersections * INTERSECTION_WEIGHT - bounds.area - aspect_penalty * ASPECT_WEIGHT


# ── Grid manipulation ─────────────────────────────────────────────────

def _place_word(
    clue: ClueEntry, row: int, col: int, direction: Direction,
    letters: LetterMap, placements: list[Placement], bounds: Bounds,
) -> Bounds:
    """Commit *clue* at (row, col) and return the widened bounds."""
    dr, dc = direction.step
    for i, letter in enumerate(clue.answer):
        r = row + dr * i
        c = col + dc * i
        existing = letters.get((r, c))
        if existing is not None and existing != letter:
            raise PlacementConflictError(
                f"Letter conflict at ({r},{c}) placing '{clue.answer}': "
                f"existing '{existing}' vs '{letter}'"
            )
        letters[(r, c)] = letter
        bounds = bounds.widen(r, c)

    placements.append(Placement(
        entry_index=clue.index, row=row, col=col,
        direction=direction, length=len(clue.answer),
    ))
    return bounds
