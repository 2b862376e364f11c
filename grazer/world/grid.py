"""Grid — the square cell store shared by generators and the gazelle.

The Grid owns ``size * size`` cells and provides the bounds predicate and
spatial queries (neighbours, counts) that every other component goes
through.  Nothing addresses a cell without checking
``is_valid_position`` first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from grazer.world.cell import Cell

if TYPE_CHECKING:
    from collections.abc import Iterator

ORTHOGONAL_OFFSETS = ((0, 1), (1, 0), (0, -1), (-1, 0))
DIAGONAL_OFFSETS = ((1, 1), (1, -1), (-1, -1), (-1, 1))


def is_valid_position(x: int, y: int, size: int) -> bool:
    """Return True if ``(x, y)`` lies inside a ``size x size`` grid."""
    return 0 <= x < size and 0 <= y < size


@dataclass
class Grid:
    """A square 2D grid of cells.

    Attributes:
        size: Number of rows and columns.
        cells: 2D list of Cell objects indexed as ``cells[y][x]``.
    """

    size: int
    cells: list[list[Cell]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialise every cell as open ground."""
        if self.size < 1:
            msg = f"grid size must be positive, got {self.size}"
            raise ValueError(msg)
        self.cells = [
            [Cell(x=x, y=y) for x in range(self.size)] for y in range(self.size)
        ]

    def is_valid(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` is inside this grid."""
        return is_valid_position(x, y, self.size)

    def cell_at(self, x: int, y: int) -> Cell:
        """Return the cell at grid coordinates ``(x, y)``.

        Args:
            x: Column index.
            y: Row index.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not self.is_valid(x, y):
            msg = f"({x}, {y}) out of bounds for {self.size}x{self.size}"
            raise IndexError(msg)
        return self.cells[y][x]

    def neighbours(
        self,
        x: int,
        y: int,
        *,
        include_diagonals: bool = True,
    ) -> list[Cell]:
        """Return adjacent cells for the given position.

        Args:
            x: Column index.
            y: Row index.
            include_diagonals: If True, return up to 8 neighbours; otherwise 4.

        Returns:
            List of neighbouring Cell objects (excludes out-of-bounds).
        """
        offsets = ORTHOGONAL_OFFSETS
        if include_diagonals:
            offsets += DIAGONAL_OFFSETS

        result: list[Cell] = []
        for dx, dy in offsets:
            nx, ny = x + dx, y + dy
            if self.is_valid(nx, ny):
                result.append(self.cells[ny][nx])
        return result

    def iter_cells(self) -> Iterator[Cell]:
        """Yield every cell, column-major (x outer, y inner)."""
        for x in range(self.size):
            for y in range(self.size):
                yield self.cells[y][x]

    def tree_count(self) -> int:
        """Return the number of cells holding a tree."""
        return sum(c.has_tree for row in self.cells for c in row)

    def food_count(self) -> int:
        """Return the number of cells holding food."""
        return sum(c.food > 0 for row in self.cells for c in row)

    def has_food(self) -> bool:
        """Return True if any food remains anywhere on the grid."""
        return any(c.food > 0 for row in self.cells for c in row)

    def empty_cells(self) -> list[Cell]:
        """Return all cells with neither a tree nor food."""
        return [c for c in self.iter_cells() if c.is_empty]


def create_grid(size: int) -> Grid:
    """Create a ``size x size`` grid of open ground."""
    return Grid(size=size)
