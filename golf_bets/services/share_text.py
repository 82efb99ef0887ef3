"""Plain-text labels and shareable summaries for rounds and settlements."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from golf_bets.domain import Player, Settlement


def stake_label(stake_cents: int) -> str:
    dollars, cents = divmod(stake_cents, 100)
    return f"${dollars}" if cents == 0 else f"${dollars}.{cents:02d}"


def money_label(cents: int, signed: bool = False) -> str:
    dollars, rest = divmod(abs(cents), 100)
    text = f"${dollars}.{rest:02d}"
    if not signed:
        return f"-{text}" if cents < 0 else text
    return f"{'-' if cents < 0 else '+'}{text}"


def wolf_label(points_per_hole: int | None = None) -> str:
    return f"{points_per_hole if points_per_hole is not None else 1} pt/hole"


def player_initials(name: str) -> str:
    parts = name.split()
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0][:2].upper()
    return (parts[0][0] + parts[-1][0]).upper()


def bbb_status_text(players: Sequence[Player], through: int, points_by_player: Mapping[str, int]) -> str:
    standings = sorted(
        ((player.name, points_by_player.get(player.id, 0)) for player in players),
        key=lambda item: -item[1],
    )
    leader_line = f"Leader: {standings[0][0]} ({standings[0][1]})" if standings else ""
    inline = " • ".join(f"{name} {points}" for name, points in standings)
    return f"BBB — Through {through}/18\n{leader_line}\n{inline}"


def settlement_text(title: str, players: Sequence[Player], settlement: Settlement) -> str:
    names = {player.id: player.name for player in players}
    totals = "\n".join(
        f"{player.name}: {money_label(settlement.net_by_player.get(player.id, 0), signed=True)}"
        for player in players
    )
    lines = "\n".join(
        f"{names.get(line.from_player, line.from_player)} pays "
        f"{names.get(line.to_player, line.to_player)} {money_label(line.amount_cents)}"
        for line in settlement.lines
    )
    return f"{title}\n\nNet:\n{totals}\n\nSuggested payments:\n{lines or '(no payments)'}"
