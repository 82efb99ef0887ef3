"""Skins: lowest stroke on a hole takes the skin, ties carry it forward."""

from __future__ import annotations

from dataclasses import dataclass

from .round import HOLES, DomainValidationError, Round, SkinsGame


@dataclass(frozen=True)
class SkinsHoleResult:
    hole: int
    carry_skins: int
    winner_id: str | None
    won_skins: int

    @property
    def decided(self) -> bool:
        return self.winner_id is not None


@dataclass(frozen=True)
class SkinsSummary:
    hole_results: list[SkinsHoleResult]
    skins_won: dict[str, int]
    carry_to_next: int


def compute_skins(round_: Round) -> SkinsSummary:
    game = round_.game
    if not isinstance(game, SkinsGame):
        raise DomainValidationError(f"not a skins round: {round_.game_type.value}")

    skins_won = {player_id: 0 for player_id in round_.player_ids}
    hole_results: list[SkinsHoleResult] = []
    carry = 0

    for hole in HOLES:
        strokes = game.strokes_by_hole.get(hole, {})
        entries = {
            player_id: strokes[player_id]
            for player_id in round_.player_ids
            if strokes.get(player_id) is not None
        }

        # Hole not fully entered yet: report the carry, leave it untouched.
        if len(entries) < len(round_.players):
            hole_results.append(SkinsHoleResult(hole=hole, carry_skins=carry, winner_id=None, won_skins=0))
            continue

        low = min(entries.values())
        low_scorers = [player_id for player_id, value in entries.items() if value == low]

        if len(low_scorers) == 1:
            winner_id = low_scorers[0]
            won = 1 + carry
            skins_won[winner_id] += won
            hole_results.append(SkinsHoleResult(hole=hole, carry_skins=carry, winner_id=winner_id, won_skins=won))
            carry = 0
        else:
            hole_results.append(SkinsHoleResult(hole=hole, carry_skins=carry, winner_id=None, won_skins=0))
            carry += 1

    return SkinsSummary(hole_results=hole_results, skins_won=skins_won, carry_to_next=carry)
