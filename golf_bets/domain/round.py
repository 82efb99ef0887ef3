from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

HOLES: Tuple[int, ...] = tuple(range(1, 19))
AWARD_SLOTS: Tuple[str, ...] = ("bingo", "bango", "bongo")

MIN_PLAYERS = 2
MAX_PLAYERS = 4
WOLF_PLAYERS = 4

Strokes = Mapping[int, Mapping[str, "int | None"]]


class DomainValidationError(ValueError):
    """Raised when a round violates a setup rule."""


class GameType(str, Enum):
    SKINS = "skins"
    WOLF = "wolf"
    BBB = "bbb"


@dataclass(frozen=True)
class Player:
    id: str
    name: str


@dataclass(frozen=True)
class HoleAwards:
    """Award record for one BBB hole; a slot set to None means "no winner"."""

    bingo: str | None = None
    bango: str | None = None
    bongo: str | None = None

    def winners(self) -> list[str]:
        return [winner for winner in (self.bingo, self.bango, self.bongo) if winner is not None]


@dataclass(frozen=True)
class SkinsGame:
    stake_cents: int
    strokes_by_hole: Strokes = field(default_factory=dict)

    game_type = GameType.SKINS


@dataclass(frozen=True)
class WolfGame:
    points_per_hole: int = 1
    lone_multiplier: int = 2
    starting_index: int = 0
    partner_by_hole: Mapping[int, "str | None"] = field(default_factory=dict)
    dollars_per_point_cents: int | None = None
    strokes_by_hole: Strokes = field(default_factory=dict)

    game_type = GameType.WOLF


@dataclass(frozen=True)
class BBBGame:
    awards_by_hole: Mapping[int, HoleAwards] = field(default_factory=dict)
    dollars_per_point_cents: int | None = None

    game_type = GameType.BBB


GameVariant = Union[SkinsGame, WolfGame, BBBGame]


@dataclass(frozen=True)
class Round:
    id: str
    players: Tuple[Player, ...]
    game: GameVariant
    name: str = ""
    locked: bool = False

    @property
    def game_type(self) -> GameType:
        return self.game.game_type

    @property
    def player_ids(self) -> list[str]:
        return [player.id for player in self.players]


def normalize_player(name: str) -> str:
    value = name.strip()
    if not value:
        raise DomainValidationError("player name must be non-empty")
    return value


def unique_preserve_order(players: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for player in players:
        normalized = normalize_player(player)
        if normalized not in seen:
            seen.add(normalized)
            result.append(normalized)
    return result


def validate_round(round_: Round) -> None:
    """Check setup rules before the round reaches any engine.

    Engines assume these preconditions hold and never re-check them.
    """
    ids = [normalize_player(player.id) for player in round_.players]
    if len(unique_preserve_order(ids)) != len(ids):
        raise DomainValidationError("players must be unique")
    if not MIN_PLAYERS <= len(ids) <= MAX_PLAYERS:
        raise DomainValidationError(f"{MIN_PLAYERS} to {MAX_PLAYERS} players required")

    game = round_.game
    known = set(ids)

    if isinstance(game, SkinsGame):
        if game.stake_cents <= 0:
            raise DomainValidationError("stake_cents must be positive")
        _validate_strokes(game.strokes_by_hole, known)
    elif isinstance(game, WolfGame):
        if len(ids) != WOLF_PLAYERS:
            raise DomainValidationError(f"wolf requires exactly {WOLF_PLAYERS} players")
        if game.points_per_hole <= 0:
            raise DomainValidationError("points_per_hole must be positive")
        if game.lone_multiplier <= 0:
            raise DomainValidationError("lone_multiplier must be positive")
        if not 0 <= game.starting_index < len(ids):
            raise DomainValidationError("starting_index out of range")
        for hole, partner in game.partner_by_hole.items():
            _ensure_hole(hole)
            if partner is not None and partner not in known:
                raise DomainValidationError(f"unknown partner on hole {hole}: {partner}")
        _validate_money_per_point(game.dollars_per_point_cents)
        _validate_strokes(game.strokes_by_hole, known)
    elif isinstance(game, BBBGame):
        _validate_money_per_point(game.dollars_per_point_cents)
        for hole, awards in game.awards_by_hole.items():
            _ensure_hole(hole)
            unknown = [winner for winner in awards.winners() if winner not in known]
            if unknown:
                raise DomainValidationError(f"unknown award winner on hole {hole}: {', '.join(unknown)}")
    else:
        raise DomainValidationError(f"unsupported game: {type(game).__name__}")


def _ensure_hole(hole: int) -> None:
    if hole not in HOLES:
        raise DomainValidationError(f"hole must be between 1 and 18, got {hole}")


def _validate_money_per_point(cents: int | None) -> None:
    if cents is not None and cents < 0:
        raise DomainValidationError("dollars_per_point_cents must not be negative")


def _validate_strokes(strokes_by_hole: Strokes, known: set[str]) -> None:
    for hole, strokes in strokes_by_hole.items():
        _ensure_hole(hole)
        unknown = sorted(set(strokes) - known)
        if unknown:
            raise DomainValidationError(f"unknown players on hole {hole}: {', '.join(unknown)}")
        for player_id, value in strokes.items():
            if value is not None and value <= 0:
                raise DomainValidationError(f"strokes must be positive: {player_id} on hole {hole}")
