"""Reasons a player command can be refused."""

from __future__ import annotations

from enum import Enum


class CommandError(str, Enum):
    """A refused deploy, remove or boost command.

    Values are the exact messages shown to the player, and compare equal
    to plain strings.
    """

    UNKNOWN_TYPE = "unknown type"
    INSUFFICIENT_RESOURCES = "insufficient resources"
    OCCUPIED = "occupied"
    INVALID_LOCATION = "invalid location"
    NO_SUCH_BOOST = "no such boost"
    NO_DEFENDER = "no defender at location"

    def __str__(self) -> str:
        return self.value
