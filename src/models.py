"""Data models for the crossword generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class CellType(Enum):
    BLACK = "BLACK"
    WHITE = "WHITE"


class Direction(Enum):
    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> tuple[int, int]:
        """(row, col) delta between consecutive letters of a word."""
        return (0, 1) if self is Direction.ACROSS else (1, 0)


Coord = tuple[int, int]


@dataclass(frozen=True)
class ClueEntry:
    """A clue/answer pair. ``index`` is the entry's position in the input."""

    index: int
    clue_text: str
    answer: str  # uppercase, alpha-only


@dataclass(frozen=True)
class Placement:
    """Where one entry's answer was committed on the unbounded grid."""

    entry_index: int
    row: int
    col: int
    direction: Direction
    length: int

    def cells(self) -> list[Coord]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(self.length)]


@dataclass(frozen=True)
class Bounds:
    """Inclusive bounding box of every lettered coordinate."""

    min_row: int = 0
    max_row: int = 0
    min_col: int = 0
    max_col: int = 0

    @property
    def rows(self) -> int:
        return self.max_row - self.min_row + 1

    @property
    def cols(self) -> int:
        return self.max_col - self.min_col + 1

    @property
    def area(self) -> int:
        return self.rows * self.cols

    def widen(self, row: int, col: int) -> Bounds:
        """Return bounds that also cover (row, col)."""
        return Bounds(
            min_row=min(self.min_row, row),
            max_row=max(self.max_row, row),
            min_col=min(self.min_col, col),
            max_col=max(self.max_col, col),
        )


@dataclass(frozen=True)
class PlacementResult:
    """Frozen output of word placement, consumed by the grid builder."""

    letters: Mapping[Coord, str]
    placements: tuple[Placement, ...]
    bounds: Bounds
    disconnected: tuple[int, ...] = ()


@dataclass
class Cell:
    """A single cell in the crossword grid."""

    row: int = 0
    col: int = 0
    cell_type: CellType = CellType.BLACK
    letter: str | None = None
    number: int | None = None

    @property
    def is_block(self) -> bool:
        return self.cell_type == CellType.BLACK


@dataclass
class Grid:
    """A rows x cols crossword grid of Cell objects."""

    rows: int
    cols: int
    cells: list[list[Cell]] = field(default_factory=list)

    @classmethod
    def create(cls, rows: int, cols: int) -> Grid:
        """Create a grid of all-BLACK cells."""
        cells = [[Cell(row=r, col=c) for c in range(cols)] for r in range(rows)]
        return cls(rows=rows, cols=cols, cells=cells)

    def is_white(self, r: int, c: int) -> bool:
        """True if (r, c) is inside the grid and holds a letter."""
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            return False
        return self.cells[r][c].cell_type == CellType.WHITE


@dataclass(frozen=True)
class NumberedClue:
    """A clue with its grid-assigned display number and cell run."""

    number: int
    clue_text: str
    answer: str
    direction: Direction
    cells: tuple[Coord, ...] = ()


@dataclass
class Puzzle:
    """Compiled crossword: dense grid plus numbered across/down clues."""

    title: str
    grid: Grid
    across: list[NumberedClue]
    down: list[NumberedClue]


class CrosswordError(Exception):
    """Fatal error during crossword generation."""


class PlacementConflictError(CrosswordError):
    """A committed word disagrees with a letter already on the grid."""


class DuplicateStartError(CrosswordError):
    """Two placements share the same start cell and direction."""


class MissingEntryError(CrosswordError):
    """A numbered run on the grid has no matching placed entry."""


class UnusedEntriesError(CrosswordError):
    """Some entries never became a clue in the compiled grid."""

    def __init__(self, answers: list[str]):
        self.answers = answers
        super().__init__(
            "Not all entries were used as clues. Missing: " + ", ".join(answers)
        )
