"""Settle every enabled wager game for a finished round."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .balances import aggregate_balances, check_conservation
from .money import from_cents
from .nassau import NassauResult, calculate_nassau
from .per_stroke import PerStrokeResult, calculate_per_stroke
from .rounds import Player, players_from_round
from .settlement import EPSILON, Transfer, settle
from .skins import CarryPolicy, SkinsResult, calculate_skins
from .strokes import StrokeLedger
from .wagers import WagerConfig

logger = logging.getLogger(__name__)

KP_UNAVAILABLE_NOTE = "KP winners are not tracked yet, so payouts cannot be calculated."

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class EngineConfig:
    strict: bool = False
    carry_policy: CarryPolicy = CarryPolicy.FORFEIT
    tolerance: float = EPSILON

    @classmethod
    def from_env(cls) -> "EngineConfig":
        strict = os.getenv("GOLF_WAGERS_STRICT", "").strip().lower() in _TRUTHY
        try:
            carry_policy = CarryPolicy(os.getenv("GOLF_WAGERS_CARRY_POLICY", CarryPolicy.FORFEIT.value).strip().lower())
        except ValueError:
            carry_policy = CarryPolicy.FORFEIT
        return cls(strict=strict, carry_policy=carry_policy)


@dataclass(frozen=True)
class GameResult:
    type: str
    key: str
    data: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "key": self.key, "data": self.data}


@dataclass
class SettlementResult:
    balances: dict[str, float] = field(default_factory=dict)
    transfers: list[Transfer] = field(default_factory=list)
    by_game: list[GameResult] = field(default_factory=list)

    @property
    def standings(self) -> list[str]:
        return sorted(self.balances, key=lambda player_id: self.balances[player_id], reverse=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "balances": dict(self.balances),
            "transfers": [transfer.to_dict() for transfer in self.transfers],
            "by_game": [game.to_dict() for game in self.by_game],
            "standings": self.standings,
        }


def settle_round(
    round_record: Mapping[str, Any] | None,
    wagers: WagerConfig | Mapping[str, Any] | None,
    config: EngineConfig | None = None,
) -> SettlementResult:
    config = config or EngineConfig()
    if not isinstance(wagers, WagerConfig):
        wagers = WagerConfig.from_mapping(wagers)
    if wagers is None or not wagers.enabled:
        return SettlementResult()

    players = players_from_round(round_record)
    ledger = StrokeLedger.from_round(round_record)

    contributions: list[dict[str, int]] = []
    by_game: list[GameResult] = []

    if wagers.skins.active:
        skins = calculate_skins(players, ledger, wagers.skins.amount_cents, config.carry_policy)
        _collect(contributions, "skins", skins.balances, config)
        by_game.append(GameResult(type="skins", key="Skins", data=_skins_data(skins)))

    if wagers.nassau.active:
        nassau = calculate_nassau(
            players,
            ledger,
            wagers.nassau.front_cents,
            wagers.nassau.back_cents,
            wagers.nassau.total_cents,
        )
        _collect(contributions, "nassau", nassau.balances, config)
        by_game.append(GameResult(type="nassau", key="Nassau", data=_nassau_data(nassau)))

    if wagers.per_stroke.active:
        per_stroke = calculate_per_stroke(players, ledger, wagers.per_stroke.amount_cents)
        _collect(contributions, "perStroke", per_stroke.balances, config)
        by_game.append(
            GameResult(type="perStroke", key="Per stroke", data=_per_stroke_data(per_stroke, ledger, players))
        )

    if wagers.kps.active:
        by_game.append(
            GameResult(type="kps", key="KPs", data={"available": False, "note": KP_UNAVAILABLE_NOTE})
        )

    net_cents = aggregate_balances((player.id for player in players), contributions)
    # largest payment first; equal amounts keep the order they were matched in
    matched = sorted(settle(net_cents), key=lambda transfer: transfer.amount, reverse=True)
    transfers = [
        Transfer(from_player=transfer.from_player, to_player=transfer.to_player, amount=from_cents(transfer.amount))
        for transfer in matched
    ]
    return SettlementResult(
        balances={player_id: from_cents(amount) for player_id, amount in net_cents.items()},
        transfers=transfers,
        by_game=by_game,
    )


def _collect(contributions: list[dict[str, int]], game: str, balances: dict[str, int], config: EngineConfig) -> None:
    # per-game cents must net to exactly zero
    check_conservation(game, balances, tolerance=config.tolerance, strict=config.strict)
    logger.debug("settled %s for %d players", game, len(balances))
    contributions.append(balances)


def _amounts(balances: Mapping[str, int]) -> dict[str, float]:
    return {player_id: from_cents(amount) for player_id, amount in balances.items()}


def _skins_data(result: SkinsResult) -> dict[str, Any]:
    return {
        "balances": _amounts(result.balances),
        "details": [
            {
                "hole": detail.hole,
                "winner": detail.winner,
                "value": from_cents(detail.value_cents),
                "carry_used": detail.carry_used,
                "carry_payout": detail.carry_payout,
                "shared_by": list(detail.shared_by),
            }
            for detail in result.details
        ],
        "unclaimed_carry": result.unclaimed_carry,
    }


def _nassau_data(result: NassauResult) -> dict[str, Any]:
    return {
        "balances": _amounts(result.balances),
        "segments": [
            {
                "label": segment.label,
                "stake": from_cents(segment.stake_cents),
                "winners": list(segment.winners),
                "pot": from_cents(segment.pot_cents),
                "per_winner_share": from_cents(segment.share_cents),
                "remainder": from_cents(segment.remainder_cents),
            }
            for segment in result.segments
        ],
    }


def _per_stroke_data(result: PerStrokeResult, ledger: StrokeLedger, players: list[Player]) -> dict[str, Any]:
    return {
        "balances": _amounts(result.balances),
        "leader_ids": list(result.leader_ids),
        "leader_total": result.leader_total,
        "totals": dict(result.totals),
        "recorded_holes": {player.id: ledger.recorded_holes(player.id) for player in players},
    }
