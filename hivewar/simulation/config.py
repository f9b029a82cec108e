"""Config -- load game setup from YAML files.

Board size, starting food, bee stats and the wave schedule live in YAML
and are parsed into typed dataclasses here, so new scenarios need no
code changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class WaveConfig:
    """One scheduled wave.

    Attributes:
        turn: Turn index on which the wave invades.
        count: Number of bees in the wave.
    """

    turn: int
    count: int


def _default_waves() -> list[WaveConfig]:
    return [
        WaveConfig(turn=2, count=1),
        WaveConfig(turn=3, count=1),
        WaveConfig(turn=5, count=2),
        WaveConfig(turn=7, count=3),
        WaveConfig(turn=10, count=5),
    ]


@dataclass
class GameConfig:
    """Top-level game configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        starting_food: Food available before the first turn.
        num_tunnels: Number of parallel tunnels.
        tunnel_length: Places per tunnel.
        moat_frequency: Every n-th place is water; 0 disables water.
        bee_armor: Armor of every bee.
        bee_damage: Sting damage of every bee.
        waves: Wave schedule.
        boosts: Starting boost counts, merged over the colony defaults.
    """

    seed: int = 42
    starting_food: int = 2
    num_tunnels: int = 3
    tunnel_length: int = 8
    moat_frequency: int = 0
    bee_armor: int = 3
    bee_damage: int = 1
    waves: list[WaveConfig] = field(default_factory=_default_waves)
    boosts: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Reject settings that cannot produce a playable board.

        Raises:
            ValueError: If a size, count or stat is out of range.
        """
        if self.num_tunnels < 1 or self.tunnel_length < 1:
            msg = "num_tunnels and tunnel_length must be at least 1"
            raise ValueError(msg)
        if self.moat_frequency < 0:
            msg = f"moat_frequency must be >= 0, got {self.moat_frequency}"
            raise ValueError(msg)
        if self.bee_armor < 1:
            msg = f"bee_armor must be >= 1, got {self.bee_armor}"
            raise ValueError(msg)
        for wave in self.waves:
            if wave.turn < 0 or wave.count < 0:
                msg = f"invalid wave {wave}"
                raise ValueError(msg)

    @classmethod
    def from_yaml(cls, path: str | Path) -> GameConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated GameConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If a value is out of range.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        waves = data.get("waves")
        return cls(
            seed=data.get("seed", cls.seed),
            starting_food=data.get("starting_food", cls.starting_food),
            num_tunnels=data.get("num_tunnels", cls.num_tunnels),
            tunnel_length=data.get("tunnel_length", cls.tunnel_length),
            moat_frequency=data.get("moat_frequency", cls.moat_frequency),
            bee_armor=data.get("bee_armor", cls.bee_armor),
            bee_damage=data.get("bee_damage", cls.bee_damage),
            waves=(
                [WaveConfig(turn=int(w["turn"]), count=int(w["count"])) for w in waves]
                if waves is not None
                else _default_waves()
            ),
            boosts={str(k): int(v) for k, v in (data.get("boosts") or {}).items()},
        )
