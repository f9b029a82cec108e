"""Entry point for ``python -m hivewar``.

Loads the default YAML config, builds a game, and opens the interactive
shell to defend the colony.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from hivewar.simulation.config import GameConfig
from hivewar.simulation.game import Game
from hivewar.ui.shell import GameShell

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def main() -> None:
    """Parse CLI args, create the game, launch the shell."""
    parser = argparse.ArgumentParser(
        prog="hivewar",
        description="Hivewar - ants defend their queen against waves of bees",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the RNG seed from the config file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING"],
        help="Verbosity of the combat log (default: INFO)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(message)s")

    config = GameConfig.from_yaml(args.config)
    if args.seed is not None:
        config.seed = args.seed
    game = Game.from_config(config)

    GameShell(game).cmdloop()


if __name__ == "__main__":
    main()
