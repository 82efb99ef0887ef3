from __future__ import annotations

import logging
import threading
from collections.abc import Mapping, Sequence
from dataclasses import replace
from uuid import uuid4

from golf_bets.config import Settings, load_settings
from golf_bets.domain import (
    AWARD_SLOTS,
    BBBGame,
    DomainValidationError,
    GameType,
    HoleAwards,
    Player,
    Round,
    SkinsGame,
    WolfGame,
    completion_by_hole,
    compute_bbb,
    compute_skins,
    compute_wolf,
    entered_stroke_count_by_hole,
    first_incomplete_hole,
    last_completed_hole,
    next_incomplete_hole,
    normalize_player,
    round_is_complete,
    settle_round,
    validate_round,
)
from golf_bets.repository import RoundRepository
from golf_bets.services.share_text import bbb_status_text, settlement_text, stake_label, wolf_label

logger = logging.getLogger(__name__)


class RoundNotFound(LookupError):
    def __init__(self, round_id: str) -> None:
        self.round_id = round_id
        super().__init__(f"round {round_id} not found")


class RoundLocked(DomainValidationError):
    def __init__(self, round_id: str) -> None:
        self.round_id = round_id
        super().__init__(f"round {round_id} is locked")


class RoundService:
    def __init__(self, repo: RoundRepository, settings: Settings | None = None) -> None:
        self.repo = repo
        self.settings = settings or load_settings()
        self._lock = threading.Lock()

    def create_round(
        self,
        game: GameType,
        players: Sequence[tuple[str | None, str]],
        *,
        name: str = "",
        stake_cents: int | None = None,
        points_per_hole: int | None = None,
        lone_multiplier: int | None = None,
        starting_index: int = 0,
        dollars_per_point_cents: int | None = None,
    ) -> Round:
        roster = tuple(
            Player(id=normalize_player(player_id or player_name), name=normalize_player(player_name))
            for player_id, player_name in players
        )

        if game == GameType.SKINS:
            if stake_cents is None:
                raise DomainValidationError("stake_cents is required for skins")
            variant = SkinsGame(stake_cents=stake_cents)
        elif game == GameType.WOLF:
            variant = WolfGame(
                points_per_hole=(
                    points_per_hole if points_per_hole is not None else self.settings.wolf_points_per_hole
                ),
                lone_multiplier=(
                    lone_multiplier if lone_multiplier is not None else self.settings.wolf_lone_multiplier
                ),
                starting_index=starting_index,
                dollars_per_point_cents=dollars_per_point_cents,
            )
        elif game == GameType.BBB:
            variant = BBBGame(dollars_per_point_cents=dollars_per_point_cents)
        else:
            raise DomainValidationError(f"unsupported game: {game}")

        round_ = Round(id=str(uuid4()), players=roster, game=variant, name=name.strip())
        validate_round(round_)
        self.repo.save(round_)
        logger.info(f"Created {game.value} round {round_.id} with {len(roster)} players")
        return round_

    def get_round(self, round_id: str) -> Round:
        round_ = self.repo.get(round_id)
        if round_ is None:
            raise RoundNotFound(round_id)
        return round_

    def set_strokes(self, round_id: str, hole: int, strokes: Mapping[str, int | None]) -> Round:
        for player_id, value in strokes.items():
            if value is not None and not self.settings.min_stroke <= value <= self.settings.max_stroke:
                raise DomainValidationError(
                    f"strokes for {player_id} must be between "
                    f"{self.settings.min_stroke} and {self.settings.max_stroke}"
                )

        with self._lock:
            round_ = self._editable(round_id)
            game = round_.game
            if isinstance(game, BBBGame):
                raise DomainValidationError("bbb rounds take awards, not strokes")

            hole_record = {**game.strokes_by_hole.get(hole, {}), **strokes}
            strokes_by_hole = {**game.strokes_by_hole, hole: hole_record}
            return self._store(replace(round_, game=replace(game, strokes_by_hole=strokes_by_hole)))

    def set_partner(self, round_id: str, hole: int, partner_id: str | None) -> Round:
        with self._lock:
            round_ = self._editable(round_id)
            game = round_.game
            if not isinstance(game, WolfGame):
                raise DomainValidationError("partners only apply to wolf rounds")

            partner_by_hole = {**game.partner_by_hole, hole: partner_id}
            return self._store(replace(round_, game=replace(game, partner_by_hole=partner_by_hole)))

    def set_awards(self, round_id: str, hole: int, awards: HoleAwards) -> Round:
        with self._lock:
            round_ = self._editable(round_id)
            game = round_.game
            if not isinstance(game, BBBGame):
                raise DomainValidationError("awards only apply to bbb rounds")

            awards_by_hole = {**game.awards_by_hole, hole: awards}
            return self._store(replace(round_, game=replace(game, awards_by_hole=awards_by_hole)))

    def clear_awards(self, round_id: str, hole: int) -> Round:
        with self._lock:
            round_ = self._editable(round_id)
            game = round_.game
            if not isinstance(game, BBBGame):
                raise DomainValidationError("awards only apply to bbb rounds")

            awards_by_hole = {key: value for key, value in game.awards_by_hole.items() if key != hole}
            return self._store(replace(round_, game=replace(game, awards_by_hole=awards_by_hole)))

    def set_locked(self, round_id: str, locked: bool) -> Round:
        with self._lock:
            round_ = self.repo.save(replace(self.get_round(round_id), locked=locked))
        logger.info(f"Round {round_id} {'locked' if locked else 'unlocked'}")
        return round_

    def get_summary(self, round_id: str) -> dict[str, object]:
        round_ = self.get_round(round_id)
        completion = completion_by_hole(round_)
        last_completed = last_completed_hole(completion)
        progress: dict[str, object] = {
            "completed_holes": [hole for hole, done in completion.items() if done],
            "last_completed_hole": last_completed,
            "first_incomplete_hole": first_incomplete_hole(completion),
            "next_incomplete_hole": next_incomplete_hole(last_completed, completion),
            "complete": round_is_complete(completion),
        }
        if not isinstance(round_.game, BBBGame):
            progress["entered_by_hole"] = entered_stroke_count_by_hole(round_)
        summary: dict[str, object] = {
            "round_id": round_.id,
            "game": round_.game_type.value,
            "progress": progress,
        }

        if isinstance(round_.game, SkinsGame):
            skins = compute_skins(round_)
            summary["label"] = f"{stake_label(round_.game.stake_cents)} per skin"
            summary["skins_won"] = skins.skins_won
            summary["carry_to_next"] = skins.carry_to_next
            summary["holes"] = [
                {
                    "hole": result.hole,
                    "carry_skins": result.carry_skins,
                    "winner_id": result.winner_id,
                    "won_skins": result.won_skins,
                }
                for result in skins.hole_results
            ]
        elif isinstance(round_.game, WolfGame):
            wolf = compute_wolf(round_)
            summary["label"] = wolf_label(round_.game.points_per_hole)
            summary["points_by_player"] = wolf.points_by_player
            summary["holes"] = [
                {
                    "hole": result.hole,
                    "wolf_id": result.wolf_id,
                    "partner_id": result.partner_id,
                    "status": result.status.value,
                    "points_delta_by_player": result.points_delta_by_player,
                    "group_delta": result.group_delta,
                }
                for result in wolf.hole_results
            ]
        else:
            bbb = compute_bbb(round_)
            summary["through"] = bbb.through
            summary["points_by_player"] = bbb.points_by_player
            summary["holes"] = [
                {"hole": hole, **{slot: getattr(awards, slot) for slot in AWARD_SLOTS}}
                for hole, awards in sorted(bbb.hole_awards.items())
            ]
            summary["status_text"] = bbb_status_text(round_.players, bbb.through, bbb.points_by_player)

        return summary

    def get_settlement(self, round_id: str) -> dict[str, object]:
        round_ = self.get_round(round_id)
        settlement = settle_round(round_)
        if settlement is None:
            return {"round_id": round_.id, "game": round_.game_type.value, "settlement": None}

        return {
            "round_id": round_.id,
            "game": round_.game_type.value,
            "settlement": {
                "net_by_player": settlement.net_by_player,
                "lines": [line.to_dict() for line in settlement.lines],
                "text": settlement_text(_settlement_title(round_), round_.players, settlement),
            },
        }

    def _editable(self, round_id: str) -> Round:
        round_ = self.get_round(round_id)
        if round_.locked:
            logger.warning(f"Rejected edit on locked round {round_id}")
            raise RoundLocked(round_id)
        return round_

    def _store(self, round_: Round) -> Round:
        validate_round(round_)
        return self.repo.save(round_)


def _settlement_title(round_: Round) -> str:
    game = round_.game
    if isinstance(game, SkinsGame):
        return f"Skins settlement ({stake_label(game.stake_cents)} per skin)"
    per_point = stake_label(game.dollars_per_point_cents or 0)
    if isinstance(game, WolfGame):
        return f"Wolf settlement ({per_point} per point)"
    return f"BBB settlement ({per_point} per point)"
