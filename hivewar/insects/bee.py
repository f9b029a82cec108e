"""Bee -- the attacker that marches from the hive toward the queen."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from hivewar.insects.insect import Insect, InsectKind

if TYPE_CHECKING:
    from hivewar.insects.ants import Ant

logger = logging.getLogger(__name__)


class Status(Enum):
    """One-turn conditions a thrown leaf can leave on a bee."""

    STUCK = "stuck"
    COLD = "cold"


@dataclass(eq=False)
class Bee(Insect):
    """A single bee.

    Attributes:
        damage: Armor removed from an ant per sting.
        status: Condition applied by the last leaf, cleared after acting.
    """

    category: ClassVar[InsectKind] = InsectKind.BEE
    name: ClassVar[str] = "Bee"

    damage: int = 1
    status: Status | None = None

    def sting(self, ant: Ant) -> bool:
        """Sting an ant for this bee's damage.

        Returns:
            True if the ant expired.
        """
        logger.info("%s stings %s!", self, ant)
        return ant.reduce_armor(self.damage)

    def is_blocked(self) -> bool:
        """Return True when an ant shares this bee's place."""
        assert self.place is not None, f"{self} is not on the board"
        return self.place.get_ant() is not None

    def act(self) -> None:
        """Sting a blocking ant, or move one step toward the queen.

        A cold bee cannot sting and a stuck bee cannot move.  Either
        status only lasts for this one action.
        """
        assert self.place is not None, f"{self} is not on the board"
        if self.is_blocked():
            if self.status is not Status.COLD:
                ant = self.place.get_ant()
                assert ant is not None
                self.sting(ant)
        elif self.armor > 0 and self.status is not Status.STUCK:
            self.place.exit_bee(self)
        self.status = None
