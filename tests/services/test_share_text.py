import pytest

from golf_bets.domain import Player, Settlement, SettlementLine
from golf_bets.services.share_text import (
    bbb_status_text,
    money_label,
    player_initials,
    settlement_text,
    stake_label,
    wolf_label,
)

PLAYERS = [Player("a", "Ann"), Player("b", "Bob")]


@pytest.mark.parametrize("cents, label", [(500, "$5"), (525, "$5.25"), (5, "$0.05"), (10000, "$100")])
def test_stake_label(cents, label) -> None:
    assert stake_label(cents) == label


def test_money_label_signs() -> None:
    assert money_label(1234) == "$12.34"
    assert money_label(-500) == "-$5.00"
    assert money_label(500, signed=True) == "+$5.00"
    assert money_label(-5, signed=True) == "-$0.05"
    assert money_label(0, signed=True) == "+$0.00"


def test_wolf_label_defaults_to_one_point() -> None:
    assert wolf_label() == "1 pt/hole"
    assert wolf_label(3) == "3 pt/hole"


@pytest.mark.parametrize("name, initials", [("Jack Nicklaus", "JN"), ("tiger", "TI"), ("  ", ""), ("Ann Marie Lee", "AL")])
def test_player_initials(name, initials) -> None:
    assert player_initials(name) == initials


def test_bbb_status_text_lists_leader_first() -> None:
    text = bbb_status_text(PLAYERS, 2, {"a": 1, "b": 3})

    assert text == "BBB — Through 2/18\nLeader: Bob (3)\nBob 3 • Ann 1"


def test_settlement_text_renders_payments() -> None:
    settlement = Settlement(
        net_by_player={"a": -500, "b": 500},
        lines=[SettlementLine(from_player="a", to_player="b", amount_cents=500)],
    )

    text = settlement_text("Skins settlement ($5 per skin)", PLAYERS, settlement)

    assert text == (
        "Skins settlement ($5 per skin)\n\n"
        "Net:\nAnn: -$5.00\nBob: +$5.00\n\n"
        "Suggested payments:\nAnn pays Bob $5.00"
    )


def test_settlement_text_without_payments() -> None:
    settlement = Settlement(net_by_player={"a": 0, "b": 0}, lines=[])

    assert settlement_text("Wolf", PLAYERS, settlement).endswith("Suggested payments:\n(no payments)")
