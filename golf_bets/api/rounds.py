from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, HTTPException, Path, status

from golf_bets.api.errors import domain_error
from golf_bets.api.schemas import (
    AwardsRequest,
    CreateRoundRequest,
    PartnerRequest,
    PlayerOut,
    RoundResponse,
    StrokesRequest,
)
from golf_bets.domain import BBBGame, DomainValidationError, HoleAwards, Round, SkinsGame, WolfGame
from golf_bets.runtime import service
from golf_bets.service import RoundNotFound
from golf_bets.services.share_text import player_initials

router = APIRouter(prefix="/rounds", tags=["rounds"])
logger = logging.getLogger(__name__)

HoleNumber = Annotated[int, Path(ge=1, le=18)]


def _round_response(round_: Round) -> RoundResponse:
    game = round_.game
    response = RoundResponse(
        id=round_.id,
        name=round_.name,
        game=round_.game_type,
        locked=round_.locked,
        players=[
            PlayerOut(id=player.id, name=player.name, initials=player_initials(player.name))
            for player in round_.players
        ],
        config=_config(round_),
    )
    if isinstance(game, (SkinsGame, WolfGame)):
        response.strokes_by_hole = {hole: dict(strokes) for hole, strokes in game.strokes_by_hole.items()}
    if isinstance(game, WolfGame):
        response.partner_by_hole = dict(game.partner_by_hole)
    if isinstance(game, BBBGame):
        response.awards_by_hole = {
            hole: AwardsRequest(bingo=awards.bingo, bango=awards.bango, bongo=awards.bongo)
            for hole, awards in game.awards_by_hole.items()
        }
    return response


def _config(round_: Round) -> dict[str, Any]:
    game = round_.game
    if isinstance(game, SkinsGame):
        return {"stake_cents": game.stake_cents}
    if isinstance(game, WolfGame):
        return {
            "points_per_hole": game.points_per_hole,
            "lone_multiplier": game.lone_multiplier,
            "starting_index": game.starting_index,
            "dollars_per_point_cents": game.dollars_per_point_cents,
        }
    return {"dollars_per_point_cents": game.dollars_per_point_cents}


def _failed(exc: Exception) -> HTTPException:
    if isinstance(exc, DomainValidationError):
        logger.warning(f"Rejected round input: {exc}")
    return domain_error(exc)


@router.post(
    "",
    response_model=RoundResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Set up a new round",
)
def create_round(payload: CreateRoundRequest) -> RoundResponse:
    try:
        round_ = service.create_round(
            payload.game,
            [(player.id, player.name) for player in payload.players],
            name=payload.name,
            stake_cents=payload.stake_cents,
            points_per_hole=payload.points_per_hole,
            lone_multiplier=payload.lone_multiplier,
            starting_index=payload.starting_index,
            dollars_per_point_cents=payload.dollars_per_point_cents,
        )
    except DomainValidationError as exc:
        raise _failed(exc) from exc
    return _round_response(round_)


@router.get("/{round_id}", response_model=RoundResponse, summary="Round snapshot")
def get_round(round_id: str) -> RoundResponse:
    try:
        return _round_response(service.get_round(round_id))
    except RoundNotFound as exc:
        raise _failed(exc) from exc


@router.put(
    "/{round_id}/holes/{hole}/strokes",
    response_model=RoundResponse,
    summary="Enter or clear strokes for a hole",
)
def set_strokes(round_id: str, hole: HoleNumber, payload: StrokesRequest) -> RoundResponse:
    try:
        return _round_response(service.set_strokes(round_id, hole, payload.strokes))
    except (RoundNotFound, DomainValidationError) as exc:
        raise _failed(exc) from exc


@router.put(
    "/{round_id}/holes/{hole}/partner",
    response_model=RoundResponse,
    summary="Pick the wolf's partner for a hole (null plays lone wolf)",
)
def set_partner(round_id: str, hole: HoleNumber, payload: PartnerRequest) -> RoundResponse:
    try:
        return _round_response(service.set_partner(round_id, hole, payload.partner_id))
    except (RoundNotFound, DomainValidationError) as exc:
        raise _failed(exc) from exc


@router.put(
    "/{round_id}/holes/{hole}/awards",
    response_model=RoundResponse,
    summary="Record bingo, bango and bongo for a hole",
)
def set_awards(round_id: str, hole: HoleNumber, payload: AwardsRequest) -> RoundResponse:
    awards = HoleAwards(bingo=payload.bingo, bango=payload.bango, bongo=payload.bongo)
    try:
        return _round_response(service.set_awards(round_id, hole, awards))
    except (RoundNotFound, DomainValidationError) as exc:
        raise _failed(exc) from exc


@router.delete(
    "/{round_id}/holes/{hole}/awards",
    response_model=RoundResponse,
    summary="Remove the award record for a hole",
)
def clear_awards(round_id: str, hole: HoleNumber) -> RoundResponse:
    try:
        return _round_response(service.clear_awards(round_id, hole))
    except (RoundNotFound, DomainValidationError) as exc:
        raise _failed(exc) from exc


@router.post("/{round_id}/lock", response_model=RoundResponse, summary="Lock the round against edits")
def lock_round(round_id: str) -> RoundResponse:
    try:
        return _round_response(service.set_locked(round_id, True))
    except RoundNotFound as exc:
        raise _failed(exc) from exc


@router.post("/{round_id}/unlock", response_model=RoundResponse, summary="Allow edits again")
def unlock_round(round_id: str) -> RoundResponse:
    try:
        return _round_response(service.set_locked(round_id, False))
    except RoundNotFound as exc:
        raise _failed(exc) from exc


@router.get("/{round_id}/summary", summary="Per-hole results and standings")
def get_summary(round_id: str) -> dict:
    try:
        return service.get_summary(round_id)
    except RoundNotFound as exc:
        raise _failed(exc) from exc


@router.get("/{round_id}/settlement", summary="Net balances and suggested payments")
def get_settlement(round_id: str) -> dict:
    try:
        return service.get_settlement(round_id)
    except (RoundNotFound, DomainValidationError) as exc:
        raise _failed(exc) from exc
