"""SimulationEngine — owns the world and sequences every state change.

Setup runs strictly in order, each step reading what the previous one
wrote:

1. Create the grid
2. Generate terrain (trees)
3. Generate food (reads ``has_tree``)
4. Place the gazelle (avoids trees and food)

During play two independent triggers mutate the world: ``move`` (from a
keypress or an automated policy) and ``tick`` (vitality drift).  Each
runs to completion before the next begins, so observers never see a
half-applied change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np
from numpy.random import Generator

from grazer.agent.direction import Direction
from grazer.agent.gazelle import Gazelle, MoveOutcome, MoveResult, view_to_string
from grazer.agent.policies import MovePolicy, View
from grazer.simulation.config import SimulationConfig
from grazer.world.food import generate_food
from grazer.world.grid import Grid, create_grid
from grazer.world.terrain import generate_terrain

logger = logging.getLogger(__name__)

MoveListener = Callable[[MoveResult], None]


class GameStatus(Enum):
    """Whether the session is still in play."""

    RUNNING = auto()
    GAME_OVER = auto()
    WON = auto()


@dataclass
class SimulationEngine:
    """Drives the gazelle world forward one event at a time.

    Attributes:
        config: Loaded simulation configuration.
        grid: The world grid.
        gazelle: The single agent.
        rng: Master seeded random generator.
        ticks: Vitality ticks applied so far.
        moves: Non-blocked moves applied so far.
        status: Current game status.
    """

    config: SimulationConfig
    grid: Grid = field(init=False)
    gazelle: Gazelle = field(init=False)
    rng: Generator = field(init=False)
    ticks: int = field(init=False, default=0)
    moves: int = field(init=False, default=0)
    status: GameStatus = field(init=False, default=GameStatus.RUNNING)
    _listeners: list[MoveListener] = field(init=False, default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Build the world from config."""
        self.config.validate()
        self.reset()

    def reset(self) -> None:
        """Discard the current world and generate a fresh one.

        Listeners stay subscribed across resets.
        """
        cfg = self.config
        self.rng = np.random.default_rng(cfg.seed)
        self.grid = create_grid(cfg.grid_size)
        generate_terrain(
            self.grid,
            self.rng,
            coverage=cfg.tree_coverage,
            num_large_clumps=cfg.num_large_clumps,
            large_clump_size=cfg.large_clump_size,
            small_clump_size=cfg.small_clump_size,
            scatter_chance=cfg.scatter_tree_chance,
            max_small_clumps=cfg.max_small_clumps,
        )
        generate_food(
            self.grid,
            self.rng,
            coverage=cfg.food_coverage,
            tree_edge_chance=cfg.tree_edge_food_chance,
            num_clusters=cfg.num_food_clusters,
            cluster_length=cfg.food_cluster_length,
            amount=cfg.food_amount,
        )
        self.gazelle = Gazelle.place(self.grid, self.rng)
        self.ticks = 0
        self.moves = 0
        self.status = GameStatus.RUNNING
        logger.info(
            "World ready: %dx%d, %d trees, %d food cells",
            cfg.grid_size,
            cfg.grid_size,
            self.grid.tree_count(),
            self.grid.food_count(),
        )

    def subscribe(self, listener: MoveListener) -> None:
        """Register a callable to receive every non-blocked MoveResult."""
        self._listeners.append(listener)

    def move(self, direction: Direction | str) -> MoveResult:
        """Move the gazelle one step and notify listeners of the change.

        Once the game has ended every move is reported as blocked.
        """
        direction = Direction.parse(direction)
        if self.status is not GameStatus.RUNNING:
            pos = self.gazelle.position
            return MoveResult(MoveOutcome.BLOCKED, direction, pos, pos)

        result = self.gazelle.move(
            direction,
            self.grid,
            feeding_relief=self.config.feeding_relief,
        )
        if result.blocked:
            return result

        self.moves += 1
        for listener in self._listeners:
            listener(result)
        if result.outcome is MoveOutcome.ATE:
            self.check_status()
        return result

    def tick(self) -> GameStatus:
        """Apply one vitality tick, then re-check win/lose conditions."""
        if self.status is not GameStatus.RUNNING:
            return self.status
        self.gazelle.update_vitality(
            hunger_rate=self.config.hunger_rate,
            thirst_rate=self.config.thirst_rate,
        )
        self.ticks += 1
        return self.check_status()

    def check_status(self) -> GameStatus:
        """Update ``status`` from the gazelle's health and remaining food."""
        if self.gazelle.vitality.health <= 0:
            self.status = GameStatus.GAME_OVER
            logger.info("Game over: gazelle health reached 0")
        elif not self.grid.has_food():
            self.status = GameStatus.WON
            logger.info("The gazelle has eaten all the food")
        return self.status

    def surrounding_view(self) -> View:
        """Return the character map around the gazelle."""
        return self.gazelle.surrounding_view(
            self.grid,
            before=self.config.view_before,
            after=self.config.view_after,
        )

    def ai_move(self, policy: MovePolicy) -> MoveResult:
        """Let ``policy`` pick a heading from the current view and apply it."""
        view = self.surrounding_view()
        logger.debug("Surrounding view:\n%s", view_to_string(view))
        direction = policy(view)
        logger.debug("Policy chose %s", direction.value)
        return self.move(direction)

    def run(
        self,
        ticks: int,
        policy: MovePolicy | None = None,
        *,
        move_every: int = 1,
    ) -> GameStatus:
        """Run headless for a fixed number of vitality ticks.

        Args:
            ticks: Number of vitality ticks to apply.
            policy: If given, makes an automated move every
                ``move_every`` ticks.
            move_every: Ticks between automated moves.

        Returns:
            The status after the last tick (stops early if the game ends).

        Raises:
            ValueError: If ``move_every`` is less than 1.
        """
        if move_every < 1:
            msg = f"move_every must be >= 1, got {move_every}"
            raise ValueError(msg)
        for i in range(ticks):
            if policy is not None and i % move_every == 0:
                self.ai_move(policy)
            if self.tick() is not GameStatus.RUNNING:
                break
        return self.status
