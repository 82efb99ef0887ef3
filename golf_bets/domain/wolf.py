"""Wolf: a rotating wolf picks a partner for 2v2 best-ball, or plays alone.

The wolf on hole ``h`` is ``players[(starting_index + h - 1) % len(players)]``.
A lone wolf wins or loses ``points_per_hole * lone_multiplier``; only the wolf's
own delta is recorded per player, the inverse amount is reported as
``group_delta`` and left for the settlement step to spread over the opponents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .round import HOLES, DomainValidationError, Round, WolfGame


class WolfHoleStatus(str, Enum):
    INCOMPLETE = "incomplete"
    TIE = "tie"
    WOLF_WIN = "wolfWin"
    WOLF_LOSE = "wolfLose"


@dataclass(frozen=True)
class WolfHoleResult:
    hole: int
    wolf_id: str
    partner_id: str | None
    status: WolfHoleStatus
    points_delta_by_player: dict[str, int]
    group_delta: int = 0

    @property
    def lone(self) -> bool:
        return self.partner_id is None


@dataclass(frozen=True)
class WolfSummary:
    points_by_player: dict[str, int]
    hole_results: list[WolfHoleResult] = field(default_factory=list)


def wolf_for_hole(round_: Round, hole: int) -> str:
    game = _wolf_game(round_)
    idx = (game.starting_index + hole - 1) % len(round_.players)
    return round_.players[idx].id


def compute_wolf(round_: Round) -> WolfSummary:
    game = _wolf_game(round_)
    player_ids = round_.player_ids
    points_by_player = {player_id: 0 for player_id in player_ids}
    hole_results: list[WolfHoleResult] = []

    for hole in HOLES:
        result = _resolve_hole(round_, game, hole)
        for player_id, delta in result.points_delta_by_player.items():
            points_by_player[player_id] += delta
        hole_results.append(result)

    return WolfSummary(points_by_player=points_by_player, hole_results=hole_results)


def _resolve_hole(round_: Round, game: WolfGame, hole: int) -> WolfHoleResult:
    player_ids = round_.player_ids
    wolf_id = wolf_for_hole(round_, hole)
    partner_id = game.partner_by_hole.get(hole)
    if partner_id == wolf_id:
        partner_id = None

    strokes = game.strokes_by_hole.get(hole, {})
    deltas = {player_id: 0 for player_id in player_ids}

    if any(strokes.get(player_id) is None for player_id in player_ids):
        return WolfHoleResult(hole, wolf_id, partner_id, WolfHoleStatus.INCOMPLETE, deltas)

    if partner_id is None:
        stake = game.points_per_hole * game.lone_multiplier
        wolf_score = strokes[wolf_id]
        others_best = min(strokes[player_id] for player_id in player_ids if player_id != wolf_id)

        if wolf_score == others_best:
            return WolfHoleResult(hole, wolf_id, None, WolfHoleStatus.TIE, deltas)

        won = wolf_score < others_best
        deltas[wolf_id] = stake if won else -stake
        return WolfHoleResult(
            hole,
            wolf_id,
            None,
            WolfHoleStatus.WOLF_WIN if won else WolfHoleStatus.WOLF_LOSE,
            deltas,
            group_delta=-deltas[wolf_id],
        )

    wolf_team = [wolf_id, partner_id]
    other_team = [player_id for player_id in player_ids if player_id not in wolf_team]
    wolf_best = min(strokes[player_id] for player_id in wolf_team)
    other_best = min(strokes[player_id] for player_id in other_team)

    if wolf_best == other_best:
        return WolfHoleResult(hole, wolf_id, partner_id, WolfHoleStatus.TIE, deltas)

    won = wolf_best < other_best
    swing = game.points_per_hole if won else -game.points_per_hole
    for player_id in wolf_team:
        deltas[player_id] = swing
    for player_id in other_team:
        deltas[player_id] = -swing

    return WolfHoleResult(
        hole,
        wolf_id,
        partner_id,
        WolfHoleStatus.WOLF_WIN if won else WolfHoleStatus.WOLF_LOSE,
        deltas,
    )


def _wolf_game(round_: Round) -> WolfGame:
    if not isinstance(round_.game, WolfGame):
        raise DomainValidationError(f"not a wolf round: {round_.game_type.value}")
    return round_.game
