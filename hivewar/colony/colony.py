"""Colony -- tunnels, food, boosts, and the three per-turn phases.

The Colony owns the whole tunnel network.  Each tunnel is a chain of
Places running from the queen's place out to a hive-side entrance.  The
colony also keeps the food balance and boost inventory, and drives the
ant, bee and place phases that make up a turn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hivewar.simulation.errors import CommandError
from hivewar.world.place import Place

if TYPE_CHECKING:
    from numpy.random import Generator

    from hivewar.insects.ants import Ant
    from hivewar.insects.bee import Bee

logger = logging.getLogger(__name__)


def default_boosts() -> dict[str, int]:
    """Return the boost inventory every colony starts with."""
    return {"FlyingLeaf": 1, "StickyLeaf": 1, "IcyLeaf": 1, "BugSpray": 0}


@dataclass(eq=False)
class Colony:
    """Top-level state for the defending ant colony.

    Attributes:
        food: Food available for deploying ants.
        num_tunnels: Number of parallel tunnels.
        tunnel_length: Places per tunnel.
        moat_frequency: Every n-th place of a tunnel is water (0 = none).
        boosts: Available count per boost name.
        places: Tunnel grid indexed as ``places[tunnel][step]``; step 0
            is next to the queen.
        entrances: The hive-side end of each tunnel.
        queen_place: Where the queen lives; any bee here loses the game.
    """

    food: int
    num_tunnels: int
    tunnel_length: int
    moat_frequency: int = 0
    boosts: dict[str, int] = field(default_factory=default_boosts)
    places: list[list[Place]] = field(init=False, repr=False)
    entrances: list[Place] = field(init=False, repr=False)
    queen_place: Place = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Dig the tunnels from the queen's place outward."""
        assert self.num_tunnels > 0 and self.tunnel_length > 0
        self.queen_place = Place("Ant Queen")
        self.places = []
        self.entrances = []
        for tunnel in range(self.num_tunnels):
            row: list[Place] = []
            prev = self.queen_place
            for step in range(self.tunnel_length):
                water = self.moat_frequency > 0 and (step + 1) % self.moat_frequency == 0
                kind = "water" if water else "tunnel"
                place = Place(f"{kind}[{tunnel},{step}]", water=water, exit=prev)
                if prev is not self.queen_place:
                    prev.entrance = place
                row.append(place)
                prev = place
            self.places.append(row)
            self.entrances.append(prev)

    # -- Economy --

    def increase_food(self, amount: int) -> None:
        self.food += amount

    def discover_boost(self, boost: str) -> None:
        """Add one of ``boost`` to the inventory, creating it if new."""
        self.boosts[boost] = self.boosts.get(boost, 0) + 1
        logger.info("Found a %s!", boost)

    def boost_names(self) -> list[str]:
        """Return the boosts with at least one available."""
        return [name for name, count in self.boosts.items() if count > 0]

    # -- Player actions --

    def deploy_ant(self, ant: Ant, place: Place) -> CommandError | None:
        """Place an ant and pay for it.

        Returns:
            None on success, otherwise the reason nothing changed.
        """
        if self.food < ant.food_cost:
            return CommandError.INSUFFICIENT_RESOURCES
        if not place.add_ant(ant):
            return CommandError.OCCUPIED
        self.food -= ant.food_cost
        logger.info("Deployed %s for %d food", ant, ant.food_cost)
        return None

    def remove_ant(self, place: Place) -> Ant | None:
        return place.remove_ant()

    def apply_boost(self, boost: str, place: Place) -> CommandError | None:
        """Give the ant at ``place`` a boost for its next action.

        The inventory is only checked here, never decremented.

        Returns:
            None on success, otherwise the reason nothing changed.
        """
        if self.boosts.get(boost, 0) < 1:
            return CommandError.NO_SUCH_BOOST
        ant = place.get_ant()
        if ant is None:
            return CommandError.NO_DEFENDER
        ant.set_boost(boost)
        return None

    # -- Queries --

    def queen_has_bees(self) -> bool:
        return len(self.queen_place.bees) > 0

    def iter_places(self) -> list[Place]:
        """Return every tunnel place, tunnel-major then step-minor."""
        return [place for row in self.places for place in row]

    def get_all_ants(self) -> list[Ant]:
        """Return every ant on the board; a guard precedes its charge."""
        ants: list[Ant] = []
        for place in self.iter_places():
            if place.guard is not None:
                ants.append(place.guard)
            if place.ant is not None:
                ants.append(place.ant)
        return ants

    def get_all_bees(self) -> list[Bee]:
        """Return every bee in the tunnels in traversal and arrival order."""
        return [bee for place in self.iter_places() for bee in place.bees]

    # -- Turn phases --

    def ants_act(self, rng: Generator) -> None:
        """Let every ant act.

        A guard first makes the ant it protects act, then acts itself.
        The protected ant still gets its own regular turn afterwards, so
        a guarded ant acts twice.  Ants that died earlier in the phase
        are skipped.
        """
        for ant in self.get_all_ants():
            if ant.place is None:
                continue
            if ant.is_guard:
                guarded = ant.place.get_guarded_ant()
                if guarded is not None:
                    guarded.act(self, rng)
                if ant.place is None:
                    continue
            ant.act(self, rng)

    def bees_act(self) -> None:
        for bee in self.get_all_bees():
            if bee.place is not None:
                bee.act()

    def places_act(self) -> None:
        for place in self.iter_places():
            place.act()
