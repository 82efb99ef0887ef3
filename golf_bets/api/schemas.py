from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from golf_bets.domain import GameType


class PlayerIn(BaseModel):
    id: str | None = Field(default=None, description="Stable player id; defaults to the name")
    name: str = Field(..., min_length=1, examples=["Alice"])


class PlayerOut(BaseModel):
    id: str
    name: str
    initials: str = ""


class CreateRoundRequest(BaseModel):
    game: GameType
    name: str = ""
    players: list[PlayerIn] = Field(..., min_length=2, max_length=4)
    stake_cents: int | None = Field(default=None, gt=0, description="Skins: stake per skin in cents")
    points_per_hole: int | None = Field(default=None, gt=0)
    lone_multiplier: int | None = Field(default=None, gt=0)
    starting_index: int = Field(default=0, ge=0, le=3)
    dollars_per_point_cents: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def validate_game_config(self) -> "CreateRoundRequest":
        if self.game == GameType.SKINS and self.stake_cents is None:
            raise ValueError("skins rounds need stake_cents")
        if self.game == GameType.WOLF and len(self.players) != 4:
            raise ValueError("wolf rounds need exactly 4 players")
        if self.starting_index >= len(self.players):
            raise ValueError("starting_index must point at a player")
        return self

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "game": "skins",
                    "name": "Saturday nassau",
                    "players": [{"name": "Alice"}, {"name": "Bob"}],
                    "stake_cents": 500,
                }
            ]
        }
    }


class StrokesRequest(BaseModel):
    strokes: dict[str, int | None] = Field(..., examples=[{"Alice": 4, "Bob": None}])


class PartnerRequest(BaseModel):
    partner_id: str | None = None


class AwardsRequest(BaseModel):
    bingo: str | None = None
    bango: str | None = None
    bongo: str | None = None


class RoundResponse(BaseModel):
    id: str
    name: str
    game: GameType
    locked: bool
    players: list[PlayerOut]
    config: dict[str, Any]
    strokes_by_hole: dict[int, dict[str, int | None]] = Field(default_factory=dict)
    partner_by_hole: dict[int, str | None] = Field(default_factory=dict)
    awards_by_hole: dict[int, AwardsRequest] = Field(default_factory=dict)
