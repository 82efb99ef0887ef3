from copy import deepcopy

import pytest

from golf_bets.domain import (
    HOLES,
    BBBGame,
    HoleAwards,
    Player,
    Round,
    SettlementLine,
    SkinsGame,
    WolfGame,
    bbb_net,
    compute_skins,
    compute_wolf,
    settle_bbb,
    settle_round,
    settle_skins,
    settle_wolf,
    skins_net,
)


def players(*ids):
    return tuple(Player(id=player_id, name=player_id) for player_id in ids)


def test_skins_two_player_example_settles_to_one_payment() -> None:
    round_ = Round(
        id="s",
        players=players("A", "B"),
        game=SkinsGame(
            stake_cents=500,
            strokes_by_hole={1: {"A": 4, "B": 5}, 2: {"A": 4, "B": 4}, 3: {"A": 5, "B": 4}},
        ),
    )

    settlement = settle_skins(round_)

    assert settlement.net_by_player == {"A": -500, "B": 500}
    assert settlement.lines == [SettlementLine(from_player="A", to_player="B", amount_cents=500)]


def test_skins_winner_collects_from_each_opponent() -> None:
    round_ = Round(
        id="s",
        players=players("A", "B", "C"),
        game=SkinsGame(stake_cents=100, strokes_by_hole={1: {"A": 3, "B": 4, "C": 5}}),
    )

    net = skins_net(round_.player_ids, compute_skins(round_), 100)

    assert net == {"A": 200, "B": -100, "C": -100}


def test_skins_net_always_sums_to_zero() -> None:
    strokes = {hole: {"A": 3 + hole % 2, "B": 4, "C": 3 + hole % 3, "D": 5} for hole in HOLES}
    round_ = Round(id="s", players=players("A", "B", "C", "D"), game=SkinsGame(250, strokes))

    settlement = settle_skins(round_)

    assert sum(settlement.net_by_player.values()) == 0


def wolf_round(strokes_by_hole, dollars_per_point_cents, partner_by_hole=None) -> Round:
    return Round(
        id="w",
        players=players("a", "b", "c", "d"),
        game=WolfGame(
            strokes_by_hole=strokes_by_hole,
            partner_by_hole=partner_by_hole or {},
            dollars_per_point_cents=dollars_per_point_cents,
        ),
    )


@pytest.mark.parametrize("dollars_per_point_cents", [None, 0])
def test_wolf_without_money_per_point_skips_settlement(dollars_per_point_cents) -> None:
    round_ = wolf_round({1: {"a": 3, "b": 4, "c": 4, "d": 4}}, dollars_per_point_cents)

    assert settle_wolf(round_) is None
    assert settle_round(round_) is None


def test_wolf_team_points_convert_directly_to_cents() -> None:
    round_ = wolf_round({1: {"a": 5, "b": 4, "c": 3, "d": 4}}, 50, partner_by_hole={1: "c"})

    settlement = settle_wolf(round_)

    assert settlement.net_by_player == {"a": 50, "b": -50, "c": 50, "d": -50}
    assert len(settlement.lines) == 2


def test_wolf_lone_hole_spreads_inverse_over_opponents() -> None:
    round_ = wolf_round({1: {"a": 3, "b": 4, "c": 5, "d": 4}}, 100)

    settlement = settle_wolf(round_)

    assert settlement.net_by_player == {"a": 200, "b": -67, "c": -67, "d": -66}
    assert sum(settlement.net_by_player.values()) == 0
    assert sum(line.amount_cents for line in settlement.lines) == 200


def test_wolf_lone_winner_collects_points_times_rate() -> None:
    round_ = wolf_round({1: {"a": 3, "b": 4, "c": 5, "d": 4}}, 100)

    summary = compute_wolf(round_)
    settlement = settle_wolf(round_)

    assert settlement.net_by_player["a"] == summary.points_by_player["a"] * 100


def test_wolf_equal_lone_wins_settle_equally() -> None:
    round_ = wolf_round(
        {1: {"a": 3, "b": 4, "c": 5, "d": 4}, 2: {"a": 5, "b": 3, "c": 5, "d": 4}},
        100,
    )

    settlement = settle_wolf(round_)

    assert settlement.net_by_player["a"] == settlement.net_by_player["b"] == 133
    assert settlement.net_by_player == {"a": 133, "b": 133, "c": -134, "d": -132}
    assert sum(settlement.net_by_player.values()) == 0


def test_wolf_lone_loss_divisible_share() -> None:
    round_ = wolf_round({1: {"a": 6, "b": 4, "c": 5, "d": 4}}, 150)

    settlement = settle_wolf(round_)

    assert settlement.net_by_player == {"a": -300, "b": 100, "c": 100, "d": 100}


def bbb_round(awards_by_hole, ids, dollars_per_point_cents) -> Round:
    return Round(
        id="b",
        players=players(*ids),
        game=BBBGame(awards_by_hole=awards_by_hole, dollars_per_point_cents=dollars_per_point_cents),
    )


def test_bbb_two_player_example() -> None:
    round_ = bbb_round(
        {1: HoleAwards(bingo="A", bango="A", bongo="A"), 2: HoleAwards(bingo="B")},
        ("A", "B"),
        100,
    )

    settlement = settle_bbb(round_)

    assert settlement.net_by_player == {"A": 200, "B": -200}
    assert settlement.lines == [SettlementLine(from_player="B", to_player="A", amount_cents=200)]


def test_bbb_single_leader_of_every_award_still_balances() -> None:
    awards = {hole: HoleAwards(bingo="a", bango="a", bongo="a") for hole in HOLES}
    round_ = bbb_round(awards, ("a", "b", "c", "d"), 25)

    settlement = settle_round(round_)

    assert settlement.net_by_player == {"a": 4050, "b": -1350, "c": -1350, "d": -1350}
    assert sum(settlement.net_by_player.values()) == 0


def test_bbb_net_formula() -> None:
    assert bbb_net(["x", "y", "z"], {"x": 2, "y": 1, "z": 0}, 10) == {"x": 30, "y": 0, "z": -30}


def test_bbb_without_money_per_point_skips_settlement() -> None:
    round_ = bbb_round({1: HoleAwards(bingo="a")}, ("a", "b"), None)

    assert settle_bbb(round_) is None


def test_settle_round_dispatches_skins() -> None:
    round_ = Round(
        id="s",
        players=players("A", "B"),
        game=SkinsGame(stake_cents=100, strokes_by_hole={1: {"A": 3, "B": 4}}),
    )

    assert settle_round(round_).net_by_player == {"A": 100, "B": -100}


@pytest.mark.parametrize(
    "settle, round_",
    [
        (
            settle_skins,
            Round(
                id="s",
                players=players("A", "B", "C"),
                game=SkinsGame(
                    stake_cents=100,
                    strokes_by_hole={1: {"A": 4, "B": 4, "C": 5}, 2: {"A": 3, "B": 4, "C": 4}},
                ),
            ),
        ),
        (
            settle_wolf,
            wolf_round(
                {1: {"a": 3, "b": 4, "c": 5, "d": 4}, 2: {"a": 5, "b": 4, "c": 3, "d": 4}},
                100,
                partner_by_hole={2: "c"},
            ),
        ),
        (
            settle_bbb,
            bbb_round({1: HoleAwards(bingo="a", bango="b"), 2: HoleAwards(bongo="c")}, ("a", "b", "c"), 50),
        ),
    ],
)
def test_settlement_is_idempotent_and_leaves_round_untouched(settle, round_) -> None:
    snapshot = deepcopy(round_)

    first = settle(round_)
    second = settle(round_)

    assert first == second
    assert round_ == snapshot

