"""Settlement adapters: engine standings to zero-summing net cents, then netting."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .bbb import BBBSummary, compute_bbb
from .netting import Settlement, correct_drift, settle_net, split_cents
from .round import BBBGame, DomainValidationError, Round, SkinsGame, WolfGame
from .skins import SkinsSummary, compute_skins
from .wolf import WolfSummary, compute_wolf


def skins_net(players: Sequence[str], summary: SkinsSummary, stake_cents: int) -> dict[str, int]:
    """Each skin pays the stake from every opponent to the winner."""
    total_players = len(players)
    net = {player: 0 for player in players}

    for result in summary.hole_results:
        if result.winner_id is None or result.won_skins <= 0:
            continue
        unit = stake_cents * result.won_skins
        for player in players:
            if player != result.winner_id:
                net[player] -= unit
        net[result.winner_id] += unit * (total_players - 1)

    return net


def wolf_net(players: Sequence[str], summary: WolfSummary, dollars_per_point_cents: int) -> dict[str, int]:
    net = {player: 0 for player in players}

    for result in summary.hole_results:
        for player, delta in result.points_delta_by_player.items():
            net[player] += delta * dollars_per_point_cents

        if result.group_delta:
            opponents = [player for player in players if player != result.wolf_id]
            shares = split_cents(result.group_delta * dollars_per_point_cents, len(opponents))
            for player, share in zip(opponents, shares):
                net[player] += share

    return correct_drift(net, players)


def bbb_net(players: Sequence[str], points_by_player: Mapping[str, int], dollars_per_point_cents: int) -> dict[str, int]:
    """Every point costs each opponent one share: ``dpp * (points * N - total)``."""
    total_players = len(players)
    total_points = sum(points_by_player.get(player, 0) for player in players)
    return {
        player: dollars_per_point_cents * (points_by_player.get(player, 0) * total_players - total_points)
        for player in players
    }


def settle_skins(round_: Round, summary: SkinsSummary | None = None) -> Settlement:
    game = round_.game
    if not isinstance(game, SkinsGame):
        raise DomainValidationError(f"not a skins round: {round_.game_type.value}")
    summary = summary or compute_skins(round_)
    players = round_.player_ids
    return settle_net(players, skins_net(players, summary, game.stake_cents))


def settle_wolf(round_: Round, summary: WolfSummary | None = None) -> Settlement | None:
    game = round_.game
    if not isinstance(game, WolfGame):
        raise DomainValidationError(f"not a wolf round: {round_.game_type.value}")
    if not game.dollars_per_point_cents:
        return None
    summary = summary or compute_wolf(round_)
    players = round_.player_ids
    return settle_net(players, wolf_net(players, summary, game.dollars_per_point_cents))


def settle_bbb(round_: Round, summary: BBBSummary | None = None) -> Settlement | None:
    game = round_.game
    if not isinstance(game, BBBGame):
        raise DomainValidationError(f"not a bbb round: {round_.game_type.value}")
    if not game.dollars_per_point_cents:
        return None
    summary = summary or compute_bbb(round_)
    players = round_.player_ids
    return settle_net(players, bbb_net(players, summary.points_by_player, game.dollars_per_point_cents))


def settle_round(round_: Round) -> Settlement | None:
    """Settle any round; ``None`` means the variant has no money configured."""
    if isinstance(round_.game, SkinsGame):
        return settle_skins(round_)
    if isinstance(round_.game, WolfGame):
        return settle_wolf(round_)
    if isinstance(round_.game, BBBGame):
        return settle_bbb(round_)
    raise DomainValidationError(f"unsupported game: {type(round_.game).__name__}")
