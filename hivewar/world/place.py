"""Place -- one step of a tunnel.

Places are linked into chains: ``exit`` points one step toward the ant
queen and ``entrance`` one step back toward the hive.  A place holds at
most one ordinary ant and at most one guard (the only case where two
ants share a place) plus any number of bees in arrival order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hivewar.insects.insect import Insect, InsectKind

if TYPE_CHECKING:
    from hivewar.insects.ants import Ant
    from hivewar.insects.bee import Bee

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Place:
    """A single location in the tunnel network.

    Attributes:
        name: Display name, e.g. ``tunnel[0,3]``.
        water: Whether the place is flooded.
        exit: Next place toward the queen, if any.
        entrance: Next place toward the hive, if any.
        ant: The ordinary ant here, if any.
        guard: The guard here, if any.
        bees: Bees here, front of the list arrived first.
    """

    name: str
    water: bool = False
    exit: Place | None = field(default=None, repr=False)
    entrance: Place | None = field(default=None, repr=False)
    ant: Ant | None = field(default=None, init=False, repr=False)
    guard: Ant | None = field(default=None, init=False, repr=False)
    bees: list[Bee] = field(default_factory=list, init=False, repr=False)

    def get_ant(self) -> Ant | None:
        """Return the ant that bees sting here: the guard if present."""
        if self.guard is not None:
            return self.guard
        return self.ant

    def get_guarded_ant(self) -> Ant | None:
        """Return the ordinary ant, which a guard would be protecting."""
        return self.ant

    def get_closest_bee(
        self,
        max_distance: int,
        min_distance: int = 0,
    ) -> Bee | None:
        """Find the closest bee walking back toward the hive.

        This place is distance 0 and each entrance hop adds one.  Within a
        place the earliest arrival wins.

        Args:
            max_distance: Furthest distance to look (inclusive).
            min_distance: Nearest distance to consider (inclusive).

        Returns:
            The bee found, or None if nothing is within range.
        """
        place: Place | None = self
        distance = 0
        while place is not None and distance <= max_distance:
            if distance >= min_distance and place.bees:
                return place.bees[0]
            place = place.entrance
            distance += 1
        return None

    def add_ant(self, ant: Ant) -> bool:
        """Put an ant in its slot (guard or ordinary).

        Returns:
            False, changing nothing, if that slot is already taken.
        """
        assert ant.place is None, f"{ant} is already placed"
        if ant.is_guard:
            if self.guard is not None:
                return False
            self.guard = ant
        else:
            if self.ant is not None:
                return False
            self.ant = ant
        ant.place = self
        return True

    def remove_ant(self) -> Ant | None:
        """Remove the guard if there is one, otherwise the ordinary ant.

        Returns:
            The removed ant, or None if the place was empty.
        """
        if self.guard is not None:
            removed = self.guard
            self.guard = None
        else:
            removed = self.ant
            self.ant = None
        if removed is not None:
            removed.place = None
        return removed

    def add_bee(self, bee: Bee) -> None:
        self.bees.append(bee)
        bee.place = self

    def remove_bee(self, bee: Bee) -> None:
        """Remove a bee if it is here; clears its place either way."""
        if bee in self.bees:
            self.bees.remove(bee)
            bee.place = None

    def remove_all_bees(self) -> None:
        for bee in self.bees:
            bee.place = None
        self.bees = []

    def exit_bee(self, bee: Bee) -> None:
        """Move a bee one step toward the queen."""
        assert self.exit is not None, f"{self.name} has no exit"
        self.remove_bee(bee)
        self.exit.add_bee(bee)

    def remove_insect(self, insect: Insect) -> None:
        """Remove an insect of either kind from this place."""
        if insect.category is InsectKind.ANT:
            if insect is self.guard:
                self.guard = None
            elif insect is self.ant:
                self.ant = None
            else:
                return
            insect.place = None
        elif insect.category is InsectKind.BEE:
            self.remove_bee(insect)  # type: ignore[arg-type]

    def act(self) -> None:
        """Flood out ants that cannot survive water.

        A guard is always washed out; the ordinary ant only when it is
        not water safe.
        """
        if not self.water:
            return
        if self.guard is not None:
            logger.info("%s drowns in %s", self.guard, self.name)
            self.remove_ant()
        if self.ant is not None and not self.ant.water_safe:
            logger.info("%s drowns in %s", self.ant, self.name)
            self.remove_ant()
