from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from golf_wagers.domain import SettlementResult
from golf_wagers.storage.models import PlayerBalance, Settlement

logger = logging.getLogger(__name__)


@dataclass
class GlobalBalance:
    total_net: float
    settlements_count: int


def record_settlement(db: Session, result: SettlementResult, *, round_id: str | None = None) -> Settlement:
    payload = result.to_dict()
    settlement = Settlement(round_id=round_id, result=payload)
    settlement.balances = [
        PlayerBalance(player_id=player_id, net=net) for player_id, net in payload["balances"].items()
    ]
    db.add(settlement)
    db.commit()
    db.refresh(settlement)
    logger.info("recorded settlement %s for round %s", settlement.id, round_id)
    return settlement


def get_settlement(db: Session, settlement_id: int) -> Settlement | None:
    return db.get(Settlement, settlement_id)


def get_global_balance(db: Session, *, player_id: str | None = None) -> GlobalBalance:
    query = select(
        func.coalesce(func.sum(PlayerBalance.net), 0.0),
        func.count(func.distinct(PlayerBalance.settlement_id)),
    )
    if player_id is not None:
        query = query.where(PlayerBalance.player_id == player_id)

    row = db.execute(query).one()
    return GlobalBalance(total_net=float(row[0] or 0.0), settlements_count=int(row[1] or 0))


def get_player_balances(db: Session) -> dict[str, Any]:
    rows = db.execute(
        select(PlayerBalance.player_id, func.coalesce(func.sum(PlayerBalance.net), 0.0).label("net"))
        .group_by(PlayerBalance.player_id)
        .order_by(PlayerBalance.player_id)
    ).all()
    return {row.player_id: float(row.net) for row in rows}
