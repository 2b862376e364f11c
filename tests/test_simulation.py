"""Tests for grazer.simulation — engine and config loading."""

from pathlib import Path

import pytest

from grazer.agent.direction import Direction
from grazer.agent.gazelle import THOUGHT_ATE, MoveOutcome, MoveResult
from grazer.agent.policies import ScriptedPolicy
from grazer.simulation.config import SimulationConfig
from grazer.simulation.engine import GameStatus, SimulationEngine


class TestSimulationConfig:
    """Tests for YAML config loading."""

    def test_defaults(self) -> None:
        cfg = SimulationConfig()
        assert cfg.seed == 42
        assert cfg.grid_size == 100
        assert cfg.tree_coverage == 0.30
        assert cfg.large_clump_size == (100, 300)

    def test_from_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text(
            "seed: 99\ngrid_size: 16\nsmall_clump_size: [2, 5]\nfood_coverage: 0.2\n",
        )
        cfg = SimulationConfig.from_yaml(yaml_file)
        assert cfg.seed == 99
        assert cfg.grid_size == 16
        assert cfg.small_clump_size == (2, 5)
        assert cfg.food_coverage == 0.2
        assert cfg.num_large_clumps == 5

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert SimulationConfig.from_yaml(yaml_file) == SimulationConfig()

    def test_shipped_default_matches_dataclass(self) -> None:
        path = Path(__file__).resolve().parent.parent / "config" / "default.yaml"
        assert SimulationConfig.from_yaml(path) == SimulationConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            SimulationConfig.from_yaml(tmp_path / "nope.yaml")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"grid_size": 0},
            {"tree_coverage": 1.5},
            {"tree_edge_food_chance": -0.1},
            {"small_clump_size": (10, 5)},
            {"food_amount": (0, 10)},
            {"ai_move_interval": 0},
        ],
    )
    def test_validate_rejects(self, overrides: dict) -> None:
        with pytest.raises(ValueError):
            SimulationConfig(**overrides).validate()


class TestSimulationEngine:
    """Tests for setup sequencing and the move/tick API."""

    def test_engine_initialises(self, small_config: SimulationConfig) -> None:
        engine = SimulationEngine(config=small_config)
        grid = engine.grid
        assert grid.size == 30
        assert grid.tree_count() == int(30 * 30 * 0.30)
        assert 0 < grid.food_count() <= int(30 * 30 * 0.10)
        assert not any(c.has_tree and c.food > 0 for c in grid.iter_cells())
        start = grid.cell_at(*engine.gazelle.position)
        assert start.is_empty
        assert engine.status is GameStatus.RUNNING

    def test_default_world(self) -> None:
        engine = SimulationEngine(config=SimulationConfig(seed=1))
        assert engine.grid.tree_count() == 3000
        assert engine.grid.food_count() <= 1000

    def test_determinism(self, small_config: SimulationConfig) -> None:
        """Same seed must produce identical worlds and trajectories."""
        route = [Direction.N, Direction.E, Direction.SE, Direction.W]
        engines = [SimulationEngine(config=small_config) for _ in range(2)]
        for engine in engines:
            engine.run(ticks=40, policy=ScriptedPolicy(route=list(route)))
        a, b = engines
        assert [(c.has_tree, c.food) for c in a.grid.iter_cells()] == [
            (c.has_tree, c.food) for c in b.grid.iter_cells()
        ]
        assert a.gazelle == b.gazelle

    def test_tick_advances(self, small_config: SimulationConfig) -> None:
        engine = SimulationEngine(config=small_config)
        hunger = engine.gazelle.vitality.hunger
        assert engine.tick() is GameStatus.RUNNING
        assert engine.ticks == 1
        assert engine.gazelle.vitality.hunger == pytest.approx(hunger + 0.1)

    def test_move_eats_and_notifies(self, small_config: SimulationConfig) -> None:
        engine = SimulationEngine(config=small_config)
        gazelle = engine.gazelle
        seen: list[MoveResult] = []
        engine.subscribe(seen.append)

        gazelle.x, gazelle.y = 15, 15
        target = engine.grid.cell_at(16, 15)
        target.has_tree = False
        target.food = 6
        result = engine.move("E")

        assert result.outcome is MoveOutcome.ATE
        assert target.food == 0
        assert gazelle.thoughts == THOUGHT_ATE
        assert seen == [result]
        assert engine.moves == 1

    def test_blocked_move_not_notified(self, small_config: SimulationConfig) -> None:
        engine = SimulationEngine(config=small_config)
        seen: list[MoveResult] = []
        engine.subscribe(seen.append)
        gazelle = engine.gazelle
        gazelle.x, gazelle.y = 15, 15
        tree = engine.grid.cell_at(15, 14)
        tree.food = 0
        tree.has_tree = True
        before = (gazelle.x, gazelle.y, gazelle.direction, gazelle.thoughts)

        result = engine.move(Direction.S)

        assert result.blocked
        assert (gazelle.x, gazelle.y, gazelle.direction, gazelle.thoughts) == before
        assert seen == []
        assert engine.moves == 0

    def test_win_when_food_gone(self, small_config: SimulationConfig) -> None:
        engine = SimulationEngine(config=small_config)
        for cell in engine.grid.iter_cells():
            cell.food = 0
        assert engine.tick() is GameStatus.WON
        assert engine.tick() is GameStatus.WON
        assert engine.ticks == 1
        assert engine.move(Direction.N).blocked

    def test_game_over_at_zero_health(self, small_config: SimulationConfig) -> None:
        engine = SimulationEngine(config=small_config)
        engine.gazelle.vitality.health = 0.0
        assert engine.tick() is GameStatus.GAME_OVER

    def test_reset_restores_world(self, small_config: SimulationConfig) -> None:
        engine = SimulationEngine(config=small_config)
        layout = [(c.has_tree, c.food) for c in engine.grid.iter_cells()]
        position = engine.gazelle.position
        engine.run(ticks=10)
        for cell in engine.grid.iter_cells():
            cell.food = 0
        engine.reset()
        assert [(c.has_tree, c.food) for c in engine.grid.iter_cells()] == layout
        assert engine.gazelle.position == position
        assert engine.ticks == 0
        assert engine.status is GameStatus.RUNNING

    def test_surrounding_view_size(self, small_config: SimulationConfig) -> None:
        engine = SimulationEngine(config=small_config)
        view = engine.surrounding_view()
        assert len(view) == 10
        assert all(len(row) == 10 for row in view)

    def test_ai_move_uses_policy(self, small_config: SimulationConfig) -> None:
        engine = SimulationEngine(config=small_config)
        gazelle = engine.gazelle
        gazelle.x, gazelle.y = 15, 15
        west = engine.grid.cell_at(14, 15)
        west.has_tree = False
        west.food = 0
        expected_view = engine.surrounding_view()
        views: list[list[list[str]]] = []

        def policy(view: list[list[str]]) -> Direction:
            views.append(view)
            return Direction.W

        result = engine.ai_move(policy)

        assert views == [expected_view]
        assert result.outcome is MoveOutcome.MOVED
        assert gazelle.position == (14, 15)
        assert gazelle.direction is Direction.W

    def test_run_rejects_non_positive_move_every(
        self,
        small_config: SimulationConfig,
    ) -> None:
        engine = SimulationEngine(config=small_config)
        with pytest.raises(ValueError, match="move_every"):
            engine.run(
                ticks=3,
                policy=ScriptedPolicy(route=[Direction.N]),
                move_every=0,
            )
        assert engine.ticks == 0

    def test_invalid_config_rejected(self) -> None:
        with pytest.raises(ValueError):
            SimulationEngine(config=SimulationConfig(grid_size=0))
