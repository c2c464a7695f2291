"""Turn net balances into a short list of player-to-player transfers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

EPSILON = 1e-6


@dataclass(frozen=True)
class Transfer:
    from_player: str
    to_player: str
    amount: int | float

    def to_dict(self) -> dict[str, int | float | str]:
        return {"from": self.from_player, "to": self.to_player, "amount": self.amount}


def settle(balances: Mapping[str, int | float]) -> list[Transfer]:
    """Greedily match the largest debtor with the largest creditor.

    The result reproduces every balance but is not guaranteed to be the
    fewest possible transfers. Equal amounts keep their input order.
    """
    creditors = [[name, amount] for name, amount in balances.items() if amount > EPSILON]
    debtors = [[name, -amount] for name, amount in balances.items() if amount < -EPSILON]
    creditors.sort(key=lambda item: item[1], reverse=True)
    debtors.sort(key=lambda item: item[1], reverse=True)

    transfers: list[Transfer] = []
    creditor_idx = 0
    debtor_idx = 0
    while creditor_idx < len(creditors) and debtor_idx < len(debtors):
        creditor = creditors[creditor_idx]
        debtor = debtors[debtor_idx]

        amount = min(creditor[1], debtor[1])
        transfers.append(Transfer(from_player=debtor[0], to_player=creditor[0], amount=amount))

        creditor[1] -= amount
        debtor[1] -= amount
        if creditor[1] <= EPSILON:
            creditor_idx += 1
        if debtor[1] <= EPSILON:
            debtor_idx += 1

    return transfers
