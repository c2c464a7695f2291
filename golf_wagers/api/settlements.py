from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from golf_wagers.api.errors import api_error, settlement_not_found
from golf_wagers.api.schemas import SettleRequest, SettlementResponse
from golf_wagers.domain import ConservationError, EngineConfig, SettlementResult, settle_round
from golf_wagers.services.history_service import get_settlement, record_settlement
from golf_wagers.storage.database import get_db

router = APIRouter(prefix="/settlements", tags=["settlements"])


def get_engine_config() -> EngineConfig:
    return EngineConfig.from_env()


def _settle(payload: SettleRequest, config: EngineConfig) -> SettlementResult:
    try:
        return settle_round(payload.round_record(), payload.wager_config(), config)
    except ConservationError as exc:
        raise api_error(
            code="settlement_inconsistent",
            message=str(exc),
            details={"game": exc.game, "imbalance": exc.imbalance},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        ) from exc


@router.post(
    "/preview",
    response_model=SettlementResponse,
    summary="Calculate payouts without recording them",
)
def preview_settlement(
    payload: SettleRequest,
    config: EngineConfig = Depends(get_engine_config),
) -> dict[str, Any]:
    result = _settle(payload, config)
    return {"round_id": payload.round.id, **result.to_dict()}


@router.post(
    "",
    response_model=SettlementResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Calculate and record payouts for a round",
)
def create_settlement(
    payload: SettleRequest,
    config: EngineConfig = Depends(get_engine_config),
    db: Session = Depends(get_db),
) -> dict[str, Any]:
    result = _settle(payload, config)
    settlement = record_settlement(db, result, round_id=payload.round.id)
    return {"id": settlement.id, "round_id": settlement.round_id, **settlement.result}


@router.get(
    "/{settlement_id}",
    response_model=SettlementResponse,
    summary="Get a recorded settlement",
)
def read_settlement(settlement_id: int, db: Session = Depends(get_db)) -> dict[str, Any]:
    settlement = get_settlement(db, settlement_id)
    if settlement is None:
        raise settlement_not_found(settlement_id)
    return {"id": settlement.id, "round_id": settlement.round_id, **settlement.result}
