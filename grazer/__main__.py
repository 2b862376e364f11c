"""Entry point for ``python -m grazer``.

Loads the default YAML config, builds the world, and either opens a
Pygame window to steer the gazelle or runs headless with an automated
move policy.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

import numpy as np

from grazer.agent.gazelle import view_to_string
from grazer.agent.policies import FoodSeekingPolicy, MovePolicy, RandomPolicy
from grazer.simulation.config import SimulationConfig
from grazer.simulation.engine import SimulationEngine
from grazer.ui.pygame_client import PygameRenderer

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)

_POLICIES = ("random", "forage")


def build_policy(name: str, config: SimulationConfig) -> MovePolicy:
    """Return the named automated move policy with its own RNG.

    View-reading policies are told where the gazelle sits in the view
    configured by ``view_before``.
    """
    rng = np.random.default_rng(config.seed + 1)
    if name == "forage":
        return FoodSeekingPolicy(rng=rng, centre=config.view_before)
    return RandomPolicy(rng=rng)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, create engine, launch renderer or headless run."""
    parser = argparse.ArgumentParser(
        prog="grazer",
        description="Grazer - a gazelle foraging a procedurally generated savanna",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the config RNG seed",
    )
    parser.add_argument(
        "--policy",
        choices=_POLICIES,
        default="random",
        help="Automated move policy (default: random)",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=8,
        help="Pixel size per grid cell (default: 8)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=30,
        help="Target frames per second (default: 30)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without a window and print the final view",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=1000,
        help="Vitality ticks to run in headless mode (default: 1000)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity (default: INFO)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None:
        config = SimulationConfig.from_yaml(args.config)
    elif _DEFAULT_CONFIG.exists():
        config = SimulationConfig.from_yaml(_DEFAULT_CONFIG)
    else:
        config = SimulationConfig()
    if args.seed is not None:
        config.seed = args.seed
    engine = SimulationEngine(config=config)
    policy = build_policy(args.policy, config)

    if args.headless:
        status = engine.run(args.ticks, policy)
        gazelle = engine.gazelle
        print(view_to_string(engine.surrounding_view()), end="")
        print(
            f"{status.name}: {engine.ticks} ticks, {engine.moves} moves, "
            f"at ({gazelle.x}, {gazelle.y}), thinking {gazelle.thoughts!r}",
        )
        return

    renderer = PygameRenderer(engine=engine, policy=policy, cell_size=args.cell_size)
    renderer.run(fps=args.fps)


if __name__ == "__main__":
    main()
