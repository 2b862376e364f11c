"""Config — load simulation parameters from YAML files.

All tunable constants (grid size, coverage targets, clump and cluster
sizes, need drift rates, timer periods) live in YAML and are parsed into
a typed dataclass here.  Missing keys fall back to the defaults below.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


def _as_range(value: Any, default: tuple[int, int]) -> tuple[int, int]:
    """Convert a two-element YAML list into an inclusive ``(lo, hi)`` tuple."""
    if value is None:
        return default
    lo, hi = value
    return int(lo), int(hi)


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        grid_size: Number of rows and columns in the square world.
        tree_coverage: Target fraction of cells covered by trees.
        num_large_clumps: Large tree clumps attempted before small ones.
        large_clump_size: Inclusive (min, max) cells per large clump.
        small_clump_size: Inclusive (min, max) cells per small clump.
        scatter_tree_chance: Probability of a lone tree on each open cell
            in the final terrain pass.
        max_small_clumps: Upper bound on small-clump attempts.
        food_coverage: Target fraction of cells holding food.
        tree_edge_food_chance: Probability of food on each tree-edge cell.
        num_food_clusters: Random-walk food clusters attempted.
        food_cluster_length: Inclusive (min, max) steps per cluster walk.
        food_amount: Inclusive (min, max) food amount per cell.
        hunger_rate: Hunger added per vitality tick.
        thirst_rate: Thirst added per vitality tick.
        feeding_relief: Hunger removed when the gazelle eats.
        view_before: Cells shown before the gazelle on each view axis.
        view_after: Cells shown after the gazelle on each view axis.
        vitality_ticks_per_second: Vitality tick rate in the UI.
        ai_move_interval: Seconds between automated moves in the UI.
    """

    seed: int = 42
    grid_size: int = 100

    # Terrain
    tree_coverage: float = 0.30
    num_large_clumps: int = 5
    large_clump_size: tuple[int, int] = (100, 300)
    small_clump_size: tuple[int, int] = (10, 59)
    scatter_tree_chance: float = 0.01
    max_small_clumps: int = 10_000

    # Food
    food_coverage: float = 0.10
    tree_edge_food_chance: float = 0.30
    num_food_clusters: int = 10
    food_cluster_length: tuple[int, int] = (5, 14)
    food_amount: tuple[int, int] = (1, 10)

    # Gazelle
    hunger_rate: float = 0.1
    thirst_rate: float = 0.1
    feeding_relief: float = 20.0
    view_before: int = 5
    view_after: int = 4

    # Timers
    vitality_ticks_per_second: float = 10.0
    ai_move_interval: float = 15.0

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated, validated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If a value is out of range.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        config = cls(
            seed=data.get("seed", cls.seed),
            grid_size=data.get("grid_size", cls.grid_size),
            tree_coverage=data.get("tree_coverage", cls.tree_coverage),
            num_large_clumps=data.get("num_large_clumps", cls.num_large_clumps),
            large_clump_size=_as_range(
                data.get("large_clump_size"),
                cls.large_clump_size,
            ),
            small_clump_size=_as_range(
                data.get("small_clump_size"),
                cls.small_clump_size,
            ),
            scatter_tree_chance=data.get(
                "scatter_tree_chance",
                cls.scatter_tree_chance,
            ),
            max_small_clumps=data.get("max_small_clumps", cls.max_small_clumps),
            food_coverage=data.get("food_coverage", cls.food_coverage),
            tree_edge_food_chance=data.get(
                "tree_edge_food_chance",
                cls.tree_edge_food_chance,
            ),
            num_food_clusters=data.get("num_food_clusters", cls.num_food_clusters),
            food_cluster_length=_as_range(
                data.get("food_cluster_length"),
                cls.food_cluster_length,
            ),
            food_amount=_as_range(data.get("food_amount"), cls.food_amount),
            hunger_rate=data.get("hunger_rate", cls.hunger_rate),
            thirst_rate=data.get("thirst_rate", cls.thirst_rate),
            feeding_relief=data.get("feeding_relief", cls.feeding_relief),
            view_before=data.get("view_before", cls.view_before),
            view_after=data.get("view_after", cls.view_after),
            vitality_ticks_per_second=data.get(
                "vitality_ticks_per_second",
                cls.vitality_ticks_per_second,
            ),
            ai_move_interval=data.get("ai_move_interval", cls.ai_move_interval),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Check that every parameter is usable.

        Raises:
            ValueError: On the first out-of-range value found.
        """
        if self.grid_size < 1:
            msg = f"grid_size must be >= 1, got {self.grid_size}"
            raise ValueError(msg)
        for name in (
            "tree_coverage",
            "food_coverage",
            "scatter_tree_chance",
            "tree_edge_food_chance",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                msg = f"{name} must be within [0, 1], got {value}"
                raise ValueError(msg)
        for name in (
            "large_clump_size",
            "small_clump_size",
            "food_cluster_length",
            "food_amount",
        ):
            lo, hi = getattr(self, name)
            if lo < 1 or hi < lo:
                msg = f"{name} must satisfy 1 <= min <= max, got ({lo}, {hi})"
                raise ValueError(msg)
        for name in ("num_large_clumps", "max_small_clumps", "num_food_clusters"):
            if getattr(self, name) < 0:
                msg = f"{name} must be >= 0, got {getattr(self, name)}"
                raise ValueError(msg)
        if self.view_before < 0 or self.view_after < 0:
            msg = "view_before and view_after must be >= 0"
            raise ValueError(msg)
        if self.vitality_ticks_per_second <= 0 or self.ai_move_interval <= 0:
            msg = "vitality_ticks_per_second and ai_move_interval must be > 0"
            raise ValueError(msg)
