"""Shared fixtures for the Hivewar test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from hivewar.colony.colony import Colony
from hivewar.simulation.config import GameConfig
from hivewar.simulation.game import Game
from hivewar.world.hive import Hive


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def colony() -> Colony:
    """Two tunnels of five places, no water, 10 food."""
    return Colony(food=10, num_tunnels=2, tunnel_length=5)


@pytest.fixture
def moat_colony() -> Colony:
    """One tunnel of six places with water at steps 2 and 5."""
    return Colony(food=20, num_tunnels=1, tunnel_length=6, moat_frequency=3)


@pytest.fixture
def hive() -> Hive:
    """An empty hive producing 3-armor, 1-damage bees."""
    return Hive(bee_armor=3, bee_damage=1)


@pytest.fixture
def game(colony: Colony, hive: Hive, rng: Generator) -> Game:
    """A game over the ``colony`` and ``hive`` fixtures, no waves."""
    return Game(colony=colony, hive=hive, rng=rng)


@pytest.fixture
def default_config() -> GameConfig:
    """Default game config (no YAML file needed)."""
    return GameConfig()
