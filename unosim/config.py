"""Simulation settings from the environment (and a .env file via the CLI)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PLAYERS = "local,dumb,random,local"


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid boolean: {raw!r}")


@dataclass(frozen=True)
class SimulationConfig:
    """Defaults for the CLI; each field has an UNOSIM_* variable."""

    games: int = 1000
    shuffle_players: bool = True
    workers: int = 1
    seed: Optional[int] = None
    players: str = DEFAULT_PLAYERS
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SimulationConfig":
        env = os.environ if environ is None else environ
        seed = env.get("UNOSIM_SEED")
        return cls(
            games=int(env.get("UNOSIM_GAMES", cls.games)),
            shuffle_players=_parse_bool(env.get("UNOSIM_SHUFFLE", "true")),
            workers=int(env.get("UNOSIM_WORKERS", cls.workers)),
            seed=int(seed) if seed else None,
            players=env.get("UNOSIM_PLAYERS", cls.players),
            log_level=env.get("UNOSIM_LOG_LEVEL", cls.log_level),
        )
