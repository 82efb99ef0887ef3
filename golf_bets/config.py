from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    min_stroke: int = 1
    max_stroke: int = 25
    wolf_points_per_hole: int = 1
    wolf_lone_multiplier: int = 2


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def load_settings() -> Settings:
    return Settings(
        log_level=os.getenv("GOLF_BETS_LOG_LEVEL", "INFO").upper(),
        min_stroke=_int_env("GOLF_BETS_MIN_STROKE", 1),
        max_stroke=_int_env("GOLF_BETS_MAX_STROKE", 25),
        wolf_points_per_hole=_int_env("GOLF_BETS_WOLF_POINTS_PER_HOLE", 1),
        wolf_lone_multiplier=_int_env("GOLF_BETS_WOLF_LONE_MULTIPLIER", 2),
    )
