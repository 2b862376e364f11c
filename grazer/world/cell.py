"""Cell — a single tile in the world grid.

A cell is either open ground, a tree, or a food patch.  Trees block
movement; food is eaten when the gazelle steps onto it.  A cell never
holds a tree and food at the same time.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Cell:
    """A single tile in the world grid.

    Attributes:
        x: Column position.
        y: Row position.
        has_tree: Whether a tree occupies this cell.
        food: Amount of food here (0 = none, otherwise 1-10).
    """

    x: int
    y: int
    has_tree: bool = False
    food: int = 0

    @property
    def is_empty(self) -> bool:
        """Return True if the cell holds neither a tree nor food."""
        return not self.has_tree and self.food == 0
