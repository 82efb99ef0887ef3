"""Turn zero-summing net balances into payment instructions.

Greedy largest creditor against largest debtor. This keeps the number of
lines at or below ``creditors + debtors - 1`` but does not promise the
minimum count; finding that minimum is NP-hard in general.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .round import DomainValidationError


@dataclass(frozen=True)
class SettlementLine:
    from_player: str
    to_player: str
    amount_cents: int

    def to_dict(self) -> dict[str, int | str]:
        return {"from": self.from_player, "to": self.to_player, "amount_cents": self.amount_cents}


@dataclass(frozen=True)
class Settlement:
    net_by_player: dict[str, int]
    lines: list[SettlementLine]


def build_transfers(players: Sequence[str], net: Mapping[str, int]) -> list[SettlementLine]:
    total = sum(net.get(player, 0) for player in players)
    if total != 0:
        raise DomainValidationError(f"net balances must sum to zero, got {total}")

    # sorted() is stable, so equal balances keep player order.
    creditors = sorted(
        ([player, net.get(player, 0)] for player in players if net.get(player, 0) > 0),
        key=lambda entry: -entry[1],
    )
    debtors = sorted(
        ([player, -net.get(player, 0)] for player in players if net.get(player, 0) < 0),
        key=lambda entry: -entry[1],
    )

    transfers: list[SettlementLine] = []
    creditor_idx = 0
    debtor_idx = 0
    while creditor_idx < len(creditors) and debtor_idx < len(debtors):
        creditor = creditors[creditor_idx]
        debtor = debtors[debtor_idx]

        amount = min(creditor[1], debtor[1])
        transfers.append(SettlementLine(from_player=debtor[0], to_player=creditor[0], amount_cents=amount))

        creditor[1] -= amount
        debtor[1] -= amount
        if creditor[1] == 0:
            creditor_idx += 1
        if debtor[1] == 0:
            debtor_idx += 1

    return transfers


def settle_net(players: Sequence[str], net: Mapping[str, int]) -> Settlement:
    net_by_player = {player: net.get(player, 0) for player in players}
    return Settlement(net_by_player=net_by_player, lines=build_transfers(players, net_by_player))


def split_cents(total: int, count: int) -> list[int]:
    """Split ``total`` over ``count`` parties; the first ``remainder`` parties carry one cent more."""
    if count <= 0:
        raise DomainValidationError("count must be positive")
    sign = 1 if total >= 0 else -1
    share, remainder = divmod(abs(total), count)
    return [sign * (share + (1 if idx < remainder else 0)) for idx in range(count)]


def correct_drift(net: Mapping[str, int], players: Sequence[str]) -> dict[str, int]:
    """Push whatever keeps ``net`` from summing to zero onto the largest-magnitude player."""
    corrected = {player: net.get(player, 0) for player in players}
    drift = sum(corrected.values())
    if drift == 0 or not players:
        return corrected

    largest = max(players, key=lambda player: abs(corrected[player]))
    corrected[largest] -= drift
    return corrected
