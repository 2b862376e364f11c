"""Terrain generation — clumped tree placement.

Trees are painted in three passes, each skipped once the coverage target
is reached:

1. A handful of large clumps (hundreds of cells each).
2. Small clumps, repeated until the target is met.
3. A sparse scatter of single trees over the remaining open ground.

Clumps grow by a randomized flood fill: the work queue is shuffled after
every successful placement so the front advances in no preferred
direction and the resulting shapes are irregular rather than diamonds.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from grazer.world.grid import ORTHOGONAL_OFFSETS, is_valid_position

if TYPE_CHECKING:
    from numpy.random import Generator

    from grazer.world.grid import Grid

logger = logging.getLogger(__name__)

TREE_COVERAGE = 0.30
NUM_LARGE_CLUMPS = 5
LARGE_CLUMP_SIZE = (100, 300)
SMALL_CLUMP_SIZE = (10, 59)
SCATTER_TREE_CHANCE = 0.01
MAX_SMALL_CLUMPS = 10_000


def place_tree(grid: Grid, x: int, y: int) -> bool:
    """Mark ``(x, y)`` as a tree if it is inside the grid and open.

    Returns:
        True if a tree was placed, False if the position is out of
        bounds or already holds a tree or food.
    """
    if not is_valid_position(x, y, grid.size):
        return False
    cell = grid.cells[y][x]
    if cell.has_tree or cell.food > 0:
        return False
    cell.has_tree = True
    return True


def grow_clump(
    grid: Grid,
    rng: Generator,
    start_x: int,
    start_y: int,
    size: int,
) -> int:
    """Grow a connected clump of trees from a seed cell.

    Neighbours are pushed regardless of their state and filtered when
    popped, so the queue may hold duplicates and already-filled cells.

    Args:
        grid: The grid to paint (mutated in place).
        rng: Seeded random generator used to shuffle the queue.
        start_x: Seed column.
        start_y: Seed row.
        size: Maximum number of trees to place.

    Returns:
        Number of trees actually placed.
    """
    queue: list[tuple[int, int]] = [(start_x, start_y)]
    placed = 0
    while queue and placed < size:
        x, y = queue.pop()
        if not place_tree(grid, x, y):
            continue
        placed += 1
        for dx, dy in ORTHOGONAL_OFFSETS:
            nx, ny = x + dx, y + dy
            if is_valid_position(nx, ny, grid.size):
                queue.append((nx, ny))
        rng.shuffle(queue)
    logger.debug(
        "Clump at (%d, %d): placed %d of %d trees",
        start_x,
        start_y,
        placed,
        size,
    )
    return placed


def generate_terrain(
    grid: Grid,
    rng: Generator,
    *,
    coverage: float = TREE_COVERAGE,
    num_large_clumps: int = NUM_LARGE_CLUMPS,
    large_clump_size: tuple[int, int] = LARGE_CLUMP_SIZE,
    small_clump_size: tuple[int, int] = SMALL_CLUMP_SIZE,
    scatter_chance: float = SCATTER_TREE_CHANCE,
    max_small_clumps: int = MAX_SMALL_CLUMPS,
) -> int:
    """Paint trees onto the grid up to ``coverage`` of all cells.

    Each clump is capped at the remaining budget, so the total never
    exceeds ``floor(coverage * size**2)``.

    Args:
        grid: The grid to paint (mutated in place).
        rng: Seeded random generator.
        coverage: Target fraction of cells to turn into trees.
        num_large_clumps: Number of large clumps attempted first.
        large_clump_size: Inclusive (min, max) size of a large clump.
        small_clump_size: Inclusive (min, max) size of a small clump.
        scatter_chance: Per-cell probability of a lone tree in the
            final pass.
        max_small_clumps: Upper bound on small-clump attempts, so a grid
            that cannot reach the target still terminates.

    Returns:
        Total number of trees placed.
    """
    size = grid.size
    target = int(size * size * coverage)
    placed = 0

    def random_clump(bounds: tuple[int, int]) -> int:
        x = int(rng.integers(0, size))
        y = int(rng.integers(0, size))
        clump_size = int(rng.integers(bounds[0], bounds[1] + 1))
        return grow_clump(grid, rng, x, y, min(clump_size, target - placed))

    for _ in range(num_large_clumps):
        if placed >= target:
            break
        placed += random_clump(large_clump_size)
    logger.debug("Large clumps placed %d trees", placed)

    attempts = 0
    while placed < target and attempts < max_small_clumps:
        placed += random_clump(small_clump_size)
        attempts += 1
    if placed < target:
        logger.warning(
            "Gave up on small clumps after %d attempts: %d of %d trees",
            attempts,
            placed,
            target,
        )

    for cell in grid.iter_cells():
        if placed >= target:
            break
        if not cell.has_tree and rng.random() < scatter_chance:
            placed += place_tree(grid, cell.x, cell.y)

    logger.info("Placed %d tree cells (target %d)", placed, target)
    return placed
