from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .errors import ConservationError

logger = logging.getLogger(__name__)


def aggregate_balances(
    player_ids: Iterable[str],
    contributions: Iterable[Mapping[str, int | float]],
) -> dict[str, int | float]:
    """Sum each player's per-game contributions into one net balance map."""
    net: dict[str, int | float] = {player_id: 0 for player_id in player_ids}
    for contribution in contributions:
        for player_id, amount in contribution.items():
            net[player_id] = net.get(player_id, 0) + amount
    return net


def check_conservation(
    game: str,
    balances: Mapping[str, int | float],
    *,
    tolerance: float,
    strict: bool = False,
) -> float:
    """Return how far a game's balances drift from zero; raise on drift in strict mode."""
    imbalance = sum(balances.values())
    if abs(imbalance) <= tolerance:
        return 0
    if strict:
        raise ConservationError(game, imbalance)
    logger.warning("%s balances do not sum to zero: off by %s", game, imbalance)
    return imbalance
