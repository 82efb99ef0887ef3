from __future__ import annotations

from collections.abc import Mapping

from .round import HOLES, BBBGame, Round


def entered_stroke_count_by_hole(round_: Round) -> dict[int, int]:
    strokes_by_hole = getattr(round_.game, "strokes_by_hole", {})
    counts: dict[int, int] = {}
    for hole in HOLES:
        strokes = strokes_by_hole.get(hole, {})
        counts[hole] = sum(1 for player_id in round_.player_ids if strokes.get(player_id) is not None)
    return counts


def hole_is_complete(round_: Round, hole: int) -> bool:
    if isinstance(round_.game, BBBGame):
        return hole in round_.game.awards_by_hole
    strokes = round_.game.strokes_by_hole.get(hole, {})
    return all(strokes.get(player_id) is not None for player_id in round_.player_ids)


def completion_by_hole(round_: Round) -> dict[int, bool]:
    return {hole: hole_is_complete(round_, hole) for hole in HOLES}


def last_completed_hole(completion: Mapping[int, bool]) -> int:
    for hole in reversed(HOLES):
        if completion.get(hole):
            return hole
    return 0


def first_incomplete_hole(completion: Mapping[int, bool]) -> int:
    for hole in HOLES:
        if not completion.get(hole):
            return hole
    return HOLES[-1]


def next_incomplete_hole(from_hole: int, completion: Mapping[int, bool]) -> int | None:
    """Next open hole after ``from_hole``, wrapping back to hole 1."""
    for hole in range(min(18, from_hole + 1), 19):
        if not completion.get(hole):
            return hole
    for hole in range(1, max(1, from_hole) + 1):
        if not completion.get(hole):
            return hole
    return None


def round_is_complete(completion: Mapping[int, bool]) -> bool:
    return all(completion.get(hole) for hole in HOLES)
