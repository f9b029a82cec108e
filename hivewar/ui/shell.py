"""Interactive command shell for playing a game in the terminal.

Commands map one-to-one onto ``Game`` methods; refused commands print
the reason and leave the board untouched.  After every turn the board is
redrawn and the game ends on a win or a loss.
"""

from __future__ import annotations

import cmd
from typing import IO, TYPE_CHECKING

from hivewar.insects.ants import ANT_PROFILES
from hivewar.simulation.game import Outcome
from hivewar.ui.board import render_board

if TYPE_CHECKING:
    from hivewar.simulation.game import Game

_WIN_MESSAGE = "Yaaaay---\nAll bees are vanquished. You win!\n"
_LOSS_MESSAGE = "Bzzzzz---\nThe ant queen has perished! Please try again.\n"
_ANT_NAMES = [profile.name for profile in ANT_PROFILES.values()]
_TURN_PHRASES = ("end turn", "take turn")


class GameShell(cmd.Cmd):
    """Read-eval-print loop around a single Game.

    Attributes:
        game: The game being played.
        outcome: Result of the last turn; the loop stops once decided.
    """

    prompt = "AvB $ "

    def __init__(
        self,
        game: Game,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        """Initialise the shell.

        Args:
            game: The game to play.
            stdin: Input stream (defaults to ``sys.stdin``).
            stdout: Output stream (defaults to ``sys.stdout``).
        """
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.game = game
        self.outcome = Outcome.UNDECIDED
        self.intro = render_board(game)

    def _say(self, text: str) -> None:
        self.stdout.write(text if text.endswith("\n") else text + "\n")

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> bool:
        aliases = {
            "add": self.do_deploy,
            "d": self.do_deploy,
            "rm": self.do_remove,
            "b": self.do_boost,
            "t": self.do_turn,
        }
        if " ".join(line.split()).lower() in _TURN_PHRASES:
            return self.do_turn("")
        command, _, arg = line.partition(" ")
        handler = aliases.get(command)
        if handler is None:
            self._say(f"Unknown command: {command}")
            return False
        return handler(arg)

    def do_show(self, arg: str) -> bool:
        """show: Show the current game board."""
        self._say(render_board(self.game))
        return False

    def do_deploy(self, arg: str) -> bool:
        """deploy <antType> <row,col>: Deploy an ant to a tunnel (eg. "0,6")."""
        args = arg.split(maxsplit=1)
        if len(args) != 2:
            self._say("Usage: deploy <antType> <row,col>")
            return False
        error = self.game.deploy_ant(args[0], args[1])
        if error is not None:
            self._say(f"Invalid deployment: {error}.")
        else:
            self._say(render_board(self.game))
        return False

    def complete_deploy(self, text: str, line: str, begidx: int, endidx: int) -> list[str]:
        return [name for name in _ANT_NAMES if name.lower().startswith(text.lower())]

    def do_remove(self, arg: str) -> bool:
        """remove <row,col>: Remove the ant from a tunnel (eg. "0,6")."""
        if not arg.strip():
            self._say("Usage: remove <row,col>")
            return False
        error = self.game.remove_ant(arg)
        if error is not None:
            self._say(f"Invalid removal: {error}.")
        else:
            self._say(render_board(self.game))
        return False

    def do_boost(self, arg: str) -> bool:
        """boost <boost> <row,col>: Apply a boost to the ant in a tunnel."""
        args = arg.split(maxsplit=1)
        if len(args) != 2:
            self._say("Usage: boost <boost> <row,col>")
            return False
        error = self.game.boost_ant(args[0], args[1])
        if error is not None:
            self._say(f"Invalid boost: {error}.")
        return False

    def complete_boost(self, text: str, line: str, begidx: int, endidx: int) -> list[str]:
        return [name for name in self.game.boost_names() if name.startswith(text)]

    def do_turn(self, arg: str) -> bool:
        """turn: End the current turn (also "end turn", "take turn")."""
        self.game.take_turn()
        self._say(render_board(self.game))
        self.outcome = self.game.outcome()
        if self.outcome is Outcome.WON:
            self._say(_WIN_MESSAGE)
            return True
        if self.outcome is Outcome.LOST:
            self._say(_LOSS_MESSAGE)
            return True
        return False

    def do_quit(self, arg: str) -> bool:
        """quit: Leave the game."""
        return True

    do_EOF = do_quit
