from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .money import split_evenly
from .rounds import Player
from .strokes import StrokeLedger


@dataclass
class PerStrokeResult:
    balances: dict[str, int] = field(default_factory=dict)
    leader_ids: list[str] = field(default_factory=list)
    leader_total: int = 0
    totals: dict[str, int] = field(default_factory=dict)


def calculate_per_stroke(players: Sequence[Player], ledger: StrokeLedger, amount_cents: int) -> PerStrokeResult:
    """Every player pays the leader ``amount_cents`` per stroke behind; co-leaders split it."""
    player_ids = [player.id for player in players]
    if len(player_ids) < 2 or amount_cents <= 0:
        return PerStrokeResult()

    totals = {player_id: ledger.total_of(player_id) for player_id in player_ids}
    leader_total = min(totals.values())
    leaders = [player_id for player_id in player_ids if totals[player_id] == leader_total]

    balances = {player_id: 0 for player_id in player_ids}
    for player_id, total in totals.items():
        behind = total - leader_total
        if behind <= 0:
            continue
        owed = behind * amount_cents
        balances[player_id] -= owed
        for leader, share in zip(leaders, split_evenly(owed, len(leaders))):
            balances[leader] += share

    return PerStrokeResult(balances=balances, leader_ids=leaders, leader_total=leader_total, totals=totals)
