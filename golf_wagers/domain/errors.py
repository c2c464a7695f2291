from __future__ import annotations


class SettlementError(ValueError):
    """Raised when a settlement cannot be produced consistently."""


class ConservationError(SettlementError):
    def __init__(self, game: str, imbalance: float) -> None:
        super().__init__(f"{game} balances do not sum to zero (off by {imbalance})")
        self.game = game
        self.imbalance = imbalance
