"""Group Nassau: lowest total wins each of front nine, back nine and the full eighteen."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .money import split_evenly
from .rounds import BACK_NINE, FRONT_NINE, HOLES, Player
from .strokes import StrokeLedger


@dataclass(frozen=True)
class NassauSegment:
    label: str
    stake_cents: int
    winners: tuple[str, ...]
    pot_cents: int
    share_cents: int
    remainder_cents: int


@dataclass
class NassauResult:
    balances: dict[str, int] = field(default_factory=dict)
    segments: list[NassauSegment] = field(default_factory=list)


def calculate_nassau(
    players: Sequence[Player],
    ledger: StrokeLedger,
    front_cents: int,
    back_cents: int,
    total_cents: int,
) -> NassauResult:
    player_ids = [player.id for player in players]
    if len(player_ids) < 2:
        return NassauResult()

    result = NassauResult(balances={player_id: 0 for player_id in player_ids})
    for label, holes, stake in (
        ("Front 9", FRONT_NINE, front_cents),
        ("Back 9", BACK_NINE, back_cents),
        ("Total 18", HOLES, total_cents),
    ):
        if stake <= 0:
            continue
        result.segments.append(_settle_segment(result.balances, player_ids, ledger, label, holes, stake))
    return result


def _settle_segment(
    balances: dict[str, int],
    player_ids: list[str],
    ledger: StrokeLedger,
    label: str,
    holes: Sequence[int],
    stake: int,
) -> NassauSegment:
    totals = {player_id: ledger.total_of(player_id, holes) for player_id in player_ids}
    best = min(totals.values())
    winners = tuple(player_id for player_id in player_ids if totals[player_id] == best)
    losers = [player_id for player_id in player_ids if player_id not in winners]

    # winners split what the losers actually paid in, so an all-way tie moves nothing
    pot = stake * len(losers)
    for player_id in losers:
        balances[player_id] -= stake
    for winner, share in zip(winners, split_evenly(pot, len(winners))):
        balances[winner] += share

    share, remainder = divmod(pot, len(winners))
    return NassauSegment(
        label=label,
        stake_cents=stake,
        winners=winners,
        pot_cents=pot,
        share_cents=share,
        remainder_cents=remainder,
    )
