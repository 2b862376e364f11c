"""Food generation — edge-biased and clustered food placement.

Food is laid down in two passes until ``coverage`` of all cells hold it:

1. **Tree edges**: open cells touching a tree (8-neighbourhood) get food
   with a fixed probability, so forage lines the woodland borders.
2. **Clusters**: short random walks across the grid drop food on every
   cell they visit.

Each food cell carries a random integer amount.  Placing onto a cell that
already holds food or a tree is a silent no-op.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from grazer.world.grid import ORTHOGONAL_OFFSETS, is_valid_position

if TYPE_CHECKING:
    from numpy.random import Generator

    from grazer.world.grid import Grid

logger = logging.getLogger(__name__)

FOOD_COVERAGE = 0.10
TREE_EDGE_FOOD_CHANCE = 0.30
NUM_FOOD_CLUSTERS = 10
FOOD_CLUSTER_LENGTH = (5, 14)
FOOD_AMOUNT = (1, 10)


def is_edge_of_tree(grid: Grid, x: int, y: int) -> bool:
    """Return True if ``(x, y)`` is open and touches at least one tree."""
    if grid.cells[y][x].has_tree:
        return False
    return any(cell.has_tree for cell in grid.neighbours(x, y, include_diagonals=True))


def place_food(
    grid: Grid,
    x: int,
    y: int,
    rng: Generator,
    amount: tuple[int, int] = FOOD_AMOUNT,
) -> int:
    """Put a random amount of food on ``(x, y)``.

    Args:
        grid: The grid to modify.
        x: Column index.
        y: Row index.
        rng: Seeded random generator for the amount.
        amount: Inclusive (min, max) food amount.

    Returns:
        1 if food was placed, 0 if the cell was out of bounds or already
        held food or a tree.
    """
    if not is_valid_position(x, y, grid.size):
        return 0
    cell = grid.cells[y][x]
    if cell.food > 0 or cell.has_tree:
        return 0
    cell.food = int(rng.integers(amount[0], amount[1] + 1))
    return 1


def generate_food(
    grid: Grid,
    rng: Generator,
    *,
    coverage: float = FOOD_COVERAGE,
    tree_edge_chance: float = TREE_EDGE_FOOD_CHANCE,
    num_clusters: int = NUM_FOOD_CLUSTERS,
    cluster_length: tuple[int, int] = FOOD_CLUSTER_LENGTH,
    amount: tuple[int, int] = FOOD_AMOUNT,
) -> int:
    """Place food on up to ``floor(coverage * size**2)`` cells.

    Must run after terrain generation, since edge placement reads
    ``has_tree``.

    Args:
        grid: The grid to modify (mutated in place).
        rng: Seeded random generator.
        coverage: Target fraction of cells to hold food.
        tree_edge_chance: Probability of food on each tree-edge cell.
        num_clusters: Number of random-walk clusters attempted.
        cluster_length: Inclusive (min, max) steps per cluster walk.
        amount: Inclusive (min, max) food amount per cell.

    Returns:
        Number of cells that received food.
    """
    size = grid.size
    target = int(size * size * coverage)
    placed = 0

    for cell in grid.iter_cells():
        if placed >= target:
            break
        if is_edge_of_tree(grid, cell.x, cell.y) and rng.random() < tree_edge_chance:
            placed += place_food(grid, cell.x, cell.y, rng, amount)
    logger.debug("Placed %d food cells along tree edges", placed)

    for c in range(num_clusters):
        if placed >= target:
            break
        x = int(rng.integers(0, size))
        y = int(rng.integers(0, size))
        length = int(rng.integers(cluster_length[0], cluster_length[1] + 1))
        logger.debug("Food cluster %d at (%d, %d), length %d", c + 1, x, y, length)
        for _ in range(length):
            if placed >= target:
                break
            placed += place_food(grid, x, y, rng, amount)
            dx, dy = ORTHOGONAL_OFFSETS[int(rng.integers(0, 4))]
            x = min(max(x + dx, 0), size - 1)
            y = min(max(y + dy, 0), size - 1)

    logger.info("Placed %d food cells (target %d)", placed, target)
    return placed
