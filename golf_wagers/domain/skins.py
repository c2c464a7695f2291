"""Skins: the outright low score on a hole wins it, ties carry the stake forward."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

from .money import split_evenly
from .rounds import HOLES, Player
from .strokes import StrokeLedger


class CarryPolicy(str, Enum):
    FORFEIT = "forfeit"
    LAST_WINNER = "last_winner"
    SPLIT = "split"


@dataclass(frozen=True)
class SkinDetail:
    hole: int
    winner: str | None
    value_cents: int
    carry_used: int
    carry_payout: bool = False
    shared_by: tuple[str, ...] = ()


@dataclass
class SkinsResult:
    balances: dict[str, int] = field(default_factory=dict)
    details: list[SkinDetail] = field(default_factory=list)
    unclaimed_carry: int = 0


@dataclass(frozen=True)
class _Fold:
    balances: dict[str, int]
    details: tuple[SkinDetail, ...] = ()
    carry: int = 0
    last_winner: str | None = None
    last_tied: tuple[str, ...] = ()


def calculate_skins(
    players: Sequence[Player],
    ledger: StrokeLedger,
    amount_cents: int,
    carry_policy: CarryPolicy = CarryPolicy.FORFEIT,
) -> SkinsResult:
    player_ids = [player.id for player in players]
    if len(player_ids) < 2 or (len(player_ids) - 1) * amount_cents <= 0:
        return SkinsResult()

    state = _Fold(balances={player_id: 0 for player_id in player_ids})
    for hole in HOLES:
        state = _play_hole(state, hole, player_ids, ledger, amount_cents)

    if state.carry and carry_policy is not CarryPolicy.FORFEIT:
        payout = _pay_out_carry(state, player_ids, amount_cents, carry_policy)
        if payout is not None:
            balances, detail = payout
            return SkinsResult(balances=balances, details=[*state.details, detail])

    return SkinsResult(balances=state.balances, details=list(state.details), unclaimed_carry=state.carry)


def _play_hole(
    state: _Fold,
    hole: int,
    player_ids: list[str],
    ledger: StrokeLedger,
    amount_cents: int,
) -> _Fold:
    if not ledger.is_complete(hole, player_ids):
        return state

    scores = {player_id: ledger.stroke_of(hole, player_id) for player_id in player_ids}
    best = min(scores.values())
    tied = tuple(player_id for player_id in player_ids if scores[player_id] == best)

    if len(tied) > 1:
        carry = state.carry + 1
        detail = SkinDetail(hole=hole, winner=None, value_cents=0, carry_used=carry)
        return replace(state, details=state.details + (detail,), carry=carry, last_tied=tied)

    winner = tied[0]
    stake = amount_cents * (1 + state.carry)
    pot = stake * (len(player_ids) - 1)
    balances = dict(state.balances)
    for player_id in player_ids:
        balances[player_id] += pot if player_id == winner else -stake

    detail = SkinDetail(hole=hole, winner=winner, value_cents=pot, carry_used=state.carry)
    return _Fold(balances=balances, details=state.details + (detail,), carry=0, last_winner=winner)


def _pay_out_carry(
    state: _Fold,
    player_ids: list[str],
    amount_cents: int,
    carry_policy: CarryPolicy,
) -> tuple[dict[str, int], SkinDetail] | None:
    stake = amount_cents * state.carry
    if carry_policy is CarryPolicy.LAST_WINNER:
        collectors: tuple[str, ...] = (state.last_winner,) if state.last_winner else ()
    else:
        collectors = state.last_tied

    payers = [player_id for player_id in player_ids if player_id not in collectors]
    if not collectors or not payers:
        return None

    pot = stake * len(payers)
    balances = dict(state.balances)
    for player_id in payers:
        balances[player_id] -= stake
    for collector, share in zip(collectors, split_evenly(pot, len(collectors))):
        balances[collector] += share

    detail = SkinDetail(
        hole=HOLES[-1],
        winner=collectors[0] if len(collectors) == 1 else None,
        value_cents=pot,
        carry_used=state.carry,
        carry_payout=True,
        shared_by=collectors,
    )
    return balances, detail
