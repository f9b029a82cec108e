"""Text rendering of the game board.

Draws every tunnel as a row of fixed-width cells.  Each cell shows the
ant icon and the number of bees there; a second line under each tunnel
marks water with ``~~~~``.  The hive column on the right shows how many
bees are still waiting.

Icons: ``G`` grower, ``T`` thrower, ``E`` eater (``*`` while digesting),
``S`` scuba, ``x`` a guard on its own.  A guarded ant is drawn in lower
case.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from hivewar.insects.ants import AntKind, EaterAnt

if TYPE_CHECKING:
    from hivewar.insects.ants import Ant
    from hivewar.simulation.game import Game
    from hivewar.world.place import Place

_CELL_WIDTH = 5
_FULL_EATER_ICON = "*"


def icon_for(ant: Ant | None) -> str:
    """Return the single-character icon for an ant (space if none)."""
    if ant is None:
        return " "
    if ant.kind is AntKind.EATER and cast(EaterAnt, ant).is_full():
        return _FULL_EATER_ICON
    return ant.profile.icon


def cell_icon(place: Place) -> str:
    """Return the icon for whatever ants occupy ``place``."""
    if place.guard is not None and place.ant is not None:
        return icon_for(place.ant).lower()
    return icon_for(place.get_ant())


def bee_marker(count: int) -> str:
    """Return ``B`` plus the count (when above one), two characters wide."""
    if count <= 0:
        return "  "
    if count == 1:
        return "B "
    return f"B{count}"


def render_board(game: Game) -> str:
    """Render the full board, header included, as a string."""
    places = game.places
    length = len(places[0])
    columns = "    ".join(str(i) for i in range(length))
    border = "=" * _CELL_WIDTH * length

    lines = [
        "The Colony is under attack!",
        f"Turn: {game.turn}, Food: {game.food}, "
        f"Boosts available: [{','.join(game.boost_names())}]",
        f"     {columns}      Hive",
    ]
    for row_index, row in enumerate(places):
        edge = f"    {border}"
        if row_index == 0:
            edge += "    " + bee_marker(game.hive_bee_count())
        lines.append(edge.rstrip())

        cells = "".join(f"{cell_icon(p)} {bee_marker(len(p.bees))} " for p in row)
        lines.append(f"{row_index})  {cells}".rstrip())

        water = "".join("~~~~ " if p.water else "==== " for p in row)
        lines.append(f"    {water}".rstrip())
    lines.append(f"     {columns}")
    return "\n".join(lines) + "\n"
