from __future__ import annotations

from dataclasses import dataclass

from .round import AWARD_SLOTS, HOLES, BBBGame, DomainValidationError, HoleAwards, Round


@dataclass(frozen=True)
class BBBSummary:
    through: int
    points_by_player: dict[str, int]
    hole_awards: dict[int, HoleAwards]


def empty_hole_awards() -> HoleAwards:
    return HoleAwards()


def compute_bbb(round_: Round) -> BBBSummary:
    """Score bingo/bango/bongo: one point per award, no zero-sum constraint.

    ``through`` follows holes from 1 and stops at the first hole without a
    record; an empty record (every slot None) still counts as entered.
    """
    game = round_.game
    if not isinstance(game, BBBGame):
        raise DomainValidationError(f"not a bbb round: {round_.game_type.value}")

    points_by_player = {player_id: 0 for player_id in round_.player_ids}
    through = 0

    for hole in HOLES:
        awards = game.awards_by_hole.get(hole)
        if awards is None:
            break
        through = hole

        for slot in AWARD_SLOTS:
            winner = getattr(awards, slot)
            if winner is not None and winner in points_by_player:
                points_by_player[winner] += 1

    return BBBSummary(through=through, points_by_player=points_by_player, hole_awards=dict(game.awards_by_hole))
