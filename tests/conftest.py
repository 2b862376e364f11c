"""Shared fixtures for the grazer test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from grazer.agent.gazelle import Gazelle
from grazer.simulation.config import SimulationConfig
from grazer.world.grid import Grid, create_grid


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_grid() -> Grid:
    """An empty 10x10 grid for fast tests."""
    return create_grid(10)


@pytest.fixture
def small_config() -> SimulationConfig:
    """A 30x30 world with clump sizes scaled down to fit."""
    return SimulationConfig(
        seed=7,
        grid_size=30,
        large_clump_size=(20, 60),
        small_clump_size=(3, 12),
    )


@pytest.fixture
def gazelle() -> Gazelle:
    """A gazelle in the middle of a 10x10 grid, facing north."""
    return Gazelle(x=5, y=5)
