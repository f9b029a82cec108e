"""Insect -- shared state and damage handling for ants and bees.

Every unit on the board is an Insect: it has an armor count, an optional
place, and a single ``act`` per turn.  Damage always flows through
``reduce_armor`` so that removal from the board happens in exactly one
spot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from hivewar.world.place import Place

logger = logging.getLogger(__name__)


class InsectKind(Enum):
    """Which side of the fight an insect is on."""

    ANT = auto()
    BEE = auto()


@dataclass(eq=False)
class Insect:
    """Base for every unit that can sit in a Place.

    Attributes:
        armor: Damage the insect can take before it expires.
        place: Where the insect currently is, or None when off the board.
    """

    category: ClassVar[InsectKind]
    name: ClassVar[str] = "Insect"

    armor: int
    place: Place | None = field(default=None, kw_only=True, repr=False)

    @property
    def is_alive(self) -> bool:
        """Return True while the insect still has armor left."""
        return self.armor > 0

    def reduce_armor(self, amount: int) -> bool:
        """Reduce armor and expire the insect once it reaches zero.

        Args:
            amount: Damage to apply.

        Returns:
            True if the insect ran out of armor.
        """
        self.armor -= amount
        if self.armor <= 0:
            self._expire()
            return True
        return False

    def _expire(self) -> None:
        logger.info("%s ran out of armor and expired", self)
        if self.place is not None:
            self.place.remove_insect(self)

    def __str__(self) -> str:
        where = self.place.name if self.place is not None else ""
        return f"{self.name}({where})"
