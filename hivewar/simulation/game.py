"""Game -- the turn controller.

Owns the turn counter and the random generator, runs the turn phases in
their fixed order, decides wins and losses, and exposes the player
commands used by the shell:

1. Ants act (guards trigger their charge first)
2. Bees act (sting or advance)
3. Places act (water washes out ants that cannot swim)
4. The hive releases any wave scheduled for this turn
5. The turn counter advances

Bees that invade on a turn therefore never act on that same turn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

import numpy as np
from numpy.random import Generator

from hivewar.colony.colony import Colony, default_boosts
from hivewar.insects.ants import make_ant
from hivewar.simulation.config import GameConfig
from hivewar.simulation.errors import CommandError
from hivewar.world.hive import Hive
from hivewar.world.place import Place

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Result of checking the board after a turn."""

    WON = "won"
    LOST = "lost"
    UNDECIDED = "undecided"


def parse_location(text: str) -> tuple[int, int]:
    """Parse ``"row,col"`` into a (tunnel, step) pair.

    Raises:
        ValueError: If the text is not two non-negative integers.
    """
    parts = text.split(",")
    if len(parts) != 2:
        msg = f"expected 'row,col', got {text!r}"
        raise ValueError(msg)
    row, col = (int(p.strip()) for p in parts)
    if row < 0 or col < 0:
        msg = f"negative coordinates in {text!r}"
        raise ValueError(msg)
    return row, col


@dataclass
class Game:
    """Drives a colony and a hive through the game, turn by turn.

    Attributes:
        colony: The defending colony.
        hive: The attacking hive.
        rng: Seeded random generator shared by every random draw.
        turn: Index of the next turn to be played.
    """

    colony: Colony
    hive: Hive
    rng: Generator = field(default_factory=np.random.default_rng)
    turn: int = 0

    @classmethod
    def from_config(cls, config: GameConfig) -> Game:
        """Build the colony, hive and waves described by ``config``."""
        colony = Colony(
            food=config.starting_food,
            num_tunnels=config.num_tunnels,
            tunnel_length=config.tunnel_length,
            moat_frequency=config.moat_frequency,
            boosts={**default_boosts(), **config.boosts},
        )
        hive = Hive(bee_armor=config.bee_armor, bee_damage=config.bee_damage)
        for wave in config.waves:
            hive.add_wave(wave.turn, wave.count)
        return cls(
            colony=colony,
            hive=hive,
            rng=np.random.default_rng(config.seed),
        )

    # -- Turn loop --

    def take_turn(self) -> None:
        """Play one full turn in the fixed phase order."""
        logger.debug("Turn %d begins", self.turn)
        self.colony.ants_act(self.rng)
        self.colony.bees_act()
        self.colony.places_act()
        self.hive.invade(self.colony, self.turn, self.rng)
        self.turn += 1

    def outcome(self) -> Outcome:
        """Decide whether the game is over.

        Any bee in the queen's place is a loss.  With no bees left in the
        tunnels or the hive the colony has won.
        """
        if self.colony.queen_has_bees():
            return Outcome.LOST
        if not self.colony.get_all_bees() and not self.hive.bees:
            return Outcome.WON
        return Outcome.UNDECIDED

    # -- Player commands --

    def deploy_ant(self, ant_type: str, location: str) -> CommandError | None:
        """Deploy a new ant of ``ant_type`` at ``"row,col"``.

        Returns:
            None on success, otherwise why nothing changed.
        """
        ant = make_ant(ant_type)
        if ant is None:
            return CommandError.UNKNOWN_TYPE
        place = self._place_at(location)
        if place is None:
            return CommandError.INVALID_LOCATION
        return self.colony.deploy_ant(ant, place)

    def remove_ant(self, location: str) -> CommandError | None:
        """Remove the ant at ``"row,col"`` (the guard, if there is one)."""
        place = self._place_at(location)
        if place is None:
            return CommandError.INVALID_LOCATION
        removed = self.colony.remove_ant(place)
        if removed is not None:
            logger.info("Removed %s from %s", removed.name, place.name)
        return None

    def boost_ant(self, boost: str, location: str) -> CommandError | None:
        """Apply ``boost`` to the ant at ``"row,col"``."""
        place = self._place_at(location)
        if place is None:
            return CommandError.INVALID_LOCATION
        return self.colony.apply_boost(boost, place)

    def _place_at(self, location: str) -> Place | None:
        try:
            row, col = parse_location(location)
            return self.colony.places[row][col]
        except (ValueError, IndexError):
            return None

    # -- Queries --

    @property
    def food(self) -> int:
        return self.colony.food

    @property
    def places(self) -> list[list[Place]]:
        return self.colony.places

    def boost_names(self) -> list[str]:
        return self.colony.boost_names()

    def hive_bee_count(self) -> int:
        return len(self.hive.bees)
