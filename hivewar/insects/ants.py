"""Ants -- the stationary defenders the player deploys into tunnels.

Each ant class carries an ``AntKind`` tag.  Everything that differs only
by a constant (armor, food cost, whether it survives water, whether it
guards, its board icon) lives in ``ANT_PROFILES`` so the board, the
places and the colony never need to inspect concrete classes.

Behaviour summary:

- **Grower**: rolls once per turn for food or a boost.
- **Thrower**: throws a leaf at the closest bee in range; boosts change
  the range or leave the bee stuck or cold, and BugSpray clears its own
  place at the cost of the thrower's life.
- **Eater**: swallows a bee in its own place and digests it over three
  turns.  Taking damage early makes it cough the bee back up.
- **Scuba**: a thrower that survives in water.
- **Guard**: does nothing on its own; takes damage for the ant it shares
  a place with.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar

from hivewar.insects.bee import Bee, Status
from hivewar.insects.insect import Insect, InsectKind

if TYPE_CHECKING:
    from numpy.random import Generator

    from hivewar.colony.colony import Colony

logger = logging.getLogger(__name__)

# -- Constants ---------------------------------------------------------------

_LEAF_RANGE = 3
_FLYING_LEAF_RANGE = 5
_BUG_SPRAY_DAMAGE = 10
_DIGEST_TURNS = 3


class Boost(str, Enum):
    """Boosts a player can hand to an ant for one action."""

    FLYING_LEAF = "FlyingLeaf"
    STICKY_LEAF = "StickyLeaf"
    ICY_LEAF = "IcyLeaf"
    BUG_SPRAY = "BugSpray"


# Cumulative roll thresholds for the grower, checked in order.
_GROWER_FOOD_BAND = 0.60
_GROWER_BOOST_BANDS = (
    (0.70, Boost.FLYING_LEAF.value),
    (0.80, Boost.STICKY_LEAF.value),
    (0.90, Boost.ICY_LEAF.value),
    (0.95, Boost.BUG_SPRAY.value),
)


class AntKind(Enum):
    """Concrete ant variants."""

    GROWER = auto()
    THROWER = auto()
    EATER = auto()
    SCUBA = auto()
    GUARD = auto()


@dataclass(frozen=True)
class AntProfile:
    """Per-kind constants.

    Attributes:
        name: Display and command name.
        armor: Starting armor.
        food_cost: Food spent to deploy one.
        water_safe: Whether the ant survives in a water place.
        is_guard: Whether the ant occupies the guard slot.
        icon: Single-character board icon.
    """

    name: str
    armor: int
    food_cost: int
    water_safe: bool = False
    is_guard: bool = False
    icon: str = "?"


ANT_PROFILES: dict[AntKind, AntProfile] = {
    AntKind.GROWER: AntProfile("Grower", armor=1, food_cost=1, icon="G"),
    AntKind.THROWER: AntProfile("Thrower", armor=1, food_cost=4, icon="T"),
    AntKind.EATER: AntProfile("Eater", armor=2, food_cost=4, icon="E"),
    AntKind.SCUBA: AntProfile(
        "Scuba",
        armor=1,
        food_cost=5,
        water_safe=True,
        icon="S",
    ),
    AntKind.GUARD: AntProfile(
        "Guard",
        armor=2,
        food_cost=4,
        is_guard=True,
        icon="x",
    ),
}


@dataclass(eq=False)
class Ant(Insect, ABC):
    """Base class for all ants.

    A boost lasts for one action.  Every kind clears it after acting,
    except a thrower that found nothing to hit.

    Attributes:
        boost: Boost name applied for the next action, if any.
    """

    category: ClassVar[InsectKind] = InsectKind.ANT
    kind: ClassVar[AntKind]

    boost: str | None = None

    @property
    def profile(self) -> AntProfile:
        """Return the constants for this ant's kind."""
        return ANT_PROFILES[self.kind]

    @property
    def name(self) -> str:  # type: ignore[override]
        return self.profile.name

    @property
    def food_cost(self) -> int:
        """Food spent to deploy this ant."""
        return self.profile.food_cost

    @property
    def is_guard(self) -> bool:
        return self.profile.is_guard

    @property
    def water_safe(self) -> bool:
        return self.profile.water_safe

    def set_boost(self, boost: str) -> None:
        """Tag this ant with a boost for its next action."""
        self.boost = boost
        logger.info("%s is given a %s", self, boost)

    @abstractmethod
    def act(self, colony: Colony, rng: Generator) -> None:
        """Perform this ant's action for the turn.

        Args:
            colony: The colony, for food and boost bookkeeping.
            rng: Seeded random generator.
        """


@dataclass(eq=False)
class GrowerAnt(Ant):
    """Grows food, and now and then a boost, for the colony."""

    kind: ClassVar[AntKind] = AntKind.GROWER
    armor: int = ANT_PROFILES[AntKind.GROWER].armor

    def act(self, colony: Colony, rng: Generator) -> None:
        self.boost = None
        roll = float(rng.random())
        if roll < _GROWER_FOOD_BAND:
            colony.increase_food(1)
            return
        for threshold, boost in _GROWER_BOOST_BANDS:
            if roll < threshold:
                colony.discover_boost(boost)
                return


@dataclass(eq=False)
class ThrowerAnt(Ant):
    """Throws leaves at the closest bee within range.

    Attributes:
        damage: Armor removed from the target per leaf.
    """

    kind: ClassVar[AntKind] = AntKind.THROWER
    armor: int = ANT_PROFILES[AntKind.THROWER].armor
    damage: int = 1

    def act(self, colony: Colony, rng: Generator) -> None:
        assert self.place is not None, f"{self} is not on the board"
        if self.boost == Boost.BUG_SPRAY:
            self._spray()
            return

        reach = _FLYING_LEAF_RANGE if self.boost == Boost.FLYING_LEAF else _LEAF_RANGE
        target = self.place.get_closest_bee(reach)
        if target is None:
            return

        logger.info("%s throws a leaf at %s", self, target)
        target.reduce_armor(self.damage)
        if self.boost == Boost.STICKY_LEAF:
            target.status = Status.STUCK
            logger.info("%s is stuck!", target)
        elif self.boost == Boost.ICY_LEAF:
            target.status = Status.COLD
            logger.info("%s is cold!", target)
        self.boost = None

    def _spray(self) -> None:
        """Dose the front bee here until none are left, then take a dose."""
        assert self.place is not None
        logger.info("%s sprays bug repellant everywhere!", self)
        while (bee := self.place.get_closest_bee(0)) is not None:
            bee.reduce_armor(_BUG_SPRAY_DAMAGE)
        self.reduce_armor(_BUG_SPRAY_DAMAGE)


@dataclass(eq=False)
class ScubaAnt(ThrowerAnt):
    """A thrower that can stay in flooded tunnels."""

    kind: ClassVar[AntKind] = AntKind.SCUBA
    armor: int = ANT_PROFILES[AntKind.SCUBA].armor


@dataclass(eq=False)
class EaterAnt(Ant):
    """Swallows a bee whole and takes a few turns to digest it.

    Attributes:
        turns_eating: 0 while hungry, otherwise turns since swallowing.
        stomach: Bees currently being digested (at most one).
    """

    kind: ClassVar[AntKind] = AntKind.EATER
    armor: int = ANT_PROFILES[AntKind.EATER].armor
    turns_eating: int = 0
    stomach: list[Bee] = field(default_factory=list, repr=False)

    def is_full(self) -> bool:
        """Return True while a bee is in the stomach."""
        return len(self.stomach) > 0

    def act(self, colony: Colony, rng: Generator) -> None:
        assert self.place is not None, f"{self} is not on the board"
        self.boost = None
        if self.turns_eating == 0:
            target = self.place.get_closest_bee(0)
            if target is not None:
                logger.info("%s eats %s!", self, target)
                self.place.remove_bee(target)
                self.stomach.append(target)
                self.turns_eating = 1
            return

        self.turns_eating += 1
        if self.turns_eating > _DIGEST_TURNS:
            if self.stomach:
                logger.info("%s finishes digesting %s", self, self.stomach[0])
            self.stomach.clear()
            self.turns_eating = 0

    def reduce_armor(self, amount: int) -> bool:
        """Take damage, coughing up a freshly eaten bee.

        A surviving eater only coughs up a bee swallowed last turn, and
        then skips straight to the end of digestion.  A dying eater
        coughs up any bee it has held for at most two turns.
        """
        self.armor -= amount
        logger.debug("%s armor reduced to %d", self, self.armor)
        if self.armor > 0:
            if self.turns_eating == 1:
                self._cough_up()
                self.turns_eating = _DIGEST_TURNS
            return False

        if 0 < self.turns_eating <= 2:
            self._cough_up()
        self._expire()
        return True

    def _cough_up(self) -> None:
        assert self.place is not None
        if not self.stomach:
            return
        eaten = self.stomach.pop(0)
        self.place.add_bee(eaten)
        logger.info("%s coughs up %s!", self, eaten)


@dataclass(eq=False)
class GuardAnt(Ant):
    """Shares a place with another ant and takes its stings."""

    kind: ClassVar[AntKind] = AntKind.GUARD
    armor: int = ANT_PROFILES[AntKind.GUARD].armor

    def get_guarded(self) -> Ant | None:
        """Return the ant this guard is protecting, if any."""
        if self.place is None:
            return None
        return self.place.get_guarded_ant()

    def act(self, colony: Colony, rng: Generator) -> None:
        self.boost = None


ANT_TYPES: dict[str, type[Ant]] = {
    cls.kind.name.lower(): cls
    for cls in (GrowerAnt, ThrowerAnt, EaterAnt, ScubaAnt, GuardAnt)
}


def make_ant(type_name: str) -> Ant | None:
    """Build a fresh ant from its (case-insensitive) type name.

    Returns:
        The new ant, or None if the name is not a known ant type.
    """
    cls = ANT_TYPES.get(type_name.strip().lower())
    if cls is None:
        return None
    return cls()
