from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from golf_wagers.services.history_service import get_global_balance, get_player_balances
from golf_wagers.storage.database import get_db

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/balance")
def stats_balance(player: str | None = None, db: Session = Depends(get_db)) -> dict:
    """Net winnings per player across recorded settlements.

    Settlements always net to zero over all players, so a running total is
    only reported for a single ``player``.
    """
    players = get_player_balances(db)
    if player is None:
        return {
            "settlements_count": get_global_balance(db).settlements_count,
            "players": [{"player_id": name, "net": net} for name, net in players.items()],
        }

    balance = get_global_balance(db, player_id=player)
    average = balance.total_net / balance.settlements_count if balance.settlements_count else 0.0
    return {
        "settlements_count": balance.settlements_count,
        "players": [{"player_id": name, "net": net} for name, net in players.items() if name == player],
        "player": {
            "player_id": player,
            "total_net": balance.total_net,
            "average_per_settlement": average,
        },
    }
