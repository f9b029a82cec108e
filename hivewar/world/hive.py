"""Hive -- where the bees wait until their wave is due.

All waves are built up front with ``add_wave``; every bee sits in the
hive until ``invade`` releases its wave into the colony's tunnel
entrances.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hivewar.insects.bee import Bee
from hivewar.world.place import Place

if TYPE_CHECKING:
    from numpy.random import Generator

    from hivewar.colony.colony import Colony

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Hive(Place):
    """A Place that stages and launches waves of bees.

    Attributes:
        bee_armor: Armor of every bee this hive creates.
        bee_damage: Sting damage of every bee this hive creates.
        waves: Bees released on each turn, keyed by turn number.
    """

    name: str = "Hive"
    bee_armor: int = 3
    bee_damage: int = 1
    waves: dict[int, list[Bee]] = field(default_factory=dict, init=False, repr=False)

    def add_wave(self, attack_turn: int, num_bees: int) -> Hive:
        """Create ``num_bees`` bees that attack on ``attack_turn``.

        Returns:
            This hive, so waves can be chained.
        """
        wave: list[Bee] = []
        for _ in range(num_bees):
            bee = Bee(self.bee_armor, self.bee_damage)
            self.add_bee(bee)
            wave.append(bee)
        self.waves[attack_turn] = wave
        logger.debug("Wave of %d bees scheduled for turn %d", num_bees, attack_turn)
        return self

    def invade(self, colony: Colony, current_turn: int, rng: Generator) -> list[Bee]:
        """Send this turn's wave to random tunnel entrances.

        Args:
            colony: Colony whose entrances receive the bees.
            current_turn: Turn index being resolved.
            rng: Seeded random generator.

        Returns:
            The bees that invaded (empty if no wave was due).
        """
        wave = self.waves.get(current_turn)
        if wave is None:
            return []
        entrances = colony.entrances
        for bee in wave:
            self.remove_bee(bee)
            entrance = entrances[int(rng.integers(len(entrances)))]
            entrance.add_bee(bee)
        logger.info("Turn %d: %d bees invade the colony", current_turn, len(wave))
        return wave
