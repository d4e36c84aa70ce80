"""Fixed-shape maze grid with pellet consumption.

Shape invariant: dimensions never change after construction. A cell only ever
transitions PELLET -> EMPTY or POWER_PELLET -> EMPTY; walls are permanent.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum

import numpy as np

logger = logging.getLogger(__name__)


class CellKind(IntEnum):
    """Cell contents, valued by the maze template encoding."""

    EMPTY = 0
    WALL = 1
    PELLET = 2
    POWER_PELLET = 3


class ConsumeResult(Enum):
    """What ``Grid.consume_pellet_at`` removed from a cell."""

    NONE = "none"
    PELLET = "pellet"
    POWER_PELLET = "power_pellet"


class OutOfBoundsError(IndexError):
    """Raised when a cell query falls outside the grid extent."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"cell ({x}, {y}) outside {width}x{height} grid")
        self.x = x
        self.y = y


_VALID_CODES = frozenset(int(kind) for kind in CellKind)
_PELLET_CODES = (int(CellKind.PELLET), int(CellKind.POWER_PELLET))


@dataclass(eq=False)
class Grid:
    """Maze cells stored as an ``(H, W)`` int8 array indexed ``[y, x]``."""

    _cells: np.ndarray

    @classmethod
    def from_template(cls, template: Sequence[Sequence[int]]) -> Grid:
        """Build a fresh grid from a row-major template of cell codes."""
        if not template or not template[0]:
            raise ValueError("template must have at least one row and column")
        width = len(template[0])
        if any(len(row) != width for row in template):
            raise ValueError("template rows must all have the same length")
        cells = np.array(template, dtype=np.int8)
        unknown = set(np.unique(cells).tolist()) - _VALID_CODES
        if unknown:
            raise ValueError(f"template contains unknown cell codes: {sorted(unknown)}")
        return cls(cells)

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell codes for rendering."""
        view = self._cells.view()
        view.setflags(write=False)
        return view

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def kind_at(self, x: int, y: int) -> CellKind:
        """Return the kind of cell ``(x, y)``; raise OutOfBoundsError outside the grid."""
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return CellKind(int(self._cells[y, x]))

    def is_walkable(self, x: int, y: int) -> bool:
        """Actor legality: in bounds and not a wall."""
        return self.in_bounds(x, y) and int(self._cells[y, x]) != CellKind.WALL

    def agent_can_enter(self, x: int, y: int) -> bool:
        """Agent legality: the raw not-a-wall test.

        Any non-wall cell is legal, including empty agent-house cells. The fixed
        maze is fully walled so agents never probe outside it; a coordinate that
        does fall outside is treated as blocked rather than indexed.
        """
        if not self.in_bounds(x, y):
            logger.warning("agent probed cell (%d, %d) outside the maze border", x, y)
            return False
        return int(self._cells[y, x]) != CellKind.WALL

    def consume_pellet_at(self, x: int, y: int) -> ConsumeResult:
        """Clear a pellet or power pellet at ``(x, y)`` and report what was eaten."""
        kind = self.kind_at(x, y)
        if kind is CellKind.PELLET:
            self._cells[y, x] = int(CellKind.EMPTY)
            return ConsumeResult.PELLET
        if kind is CellKind.POWER_PELLET:
            self._cells[y, x] = int(CellKind.EMPTY)
            return ConsumeResult.POWER_PELLET
        return ConsumeResult.NONE

    def pellet_count(self) -> int:
        """Number of cells still holding a pellet or power pellet."""
        return int(np.isin(self._cells, _PELLET_CODES).sum())

    def cells_of_kind(self, kind: CellKind) -> list[tuple[int, int]]:
        """Return ``(x, y)`` coordinates of every cell of ``kind`` in row-major order."""
        ys, xs = np.nonzero(self._cells == int(kind))
        return [(int(x), int(y)) for y, x in zip(ys, xs, strict=True)]
