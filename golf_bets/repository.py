from __future__ import annotations

from golf_bets.domain import Round


class RoundRepository:
    """In-process registry of round snapshots keyed by round id."""

    def __init__(self) -> None:
        self._rounds: dict[str, Round] = {}

    def save(self, round_: Round) -> Round:
        self._rounds[round_.id] = round_
        return round_

    def get(self, round_id: str) -> Round | None:
        return self._rounds.get(round_id)
