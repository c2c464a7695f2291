from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PlayerPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | int | None = None
    name: str | None = None


class RoundPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    players: list[PlayerPayload] = Field(default_factory=list)
    holes: dict[str, Any] | list[Any] | None = Field(
        default=None,
        description="Strokes keyed by hole number, or a list where index 0 is hole 1",
    )


class StakePayload(BaseModel):
    enabled: bool = False
    amount: float | str | None = None


class NassauPayload(BaseModel):
    enabled: bool = False
    front: float | str | None = None
    back: float | str | None = None
    total: float | str | None = None


class WagersPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = False
    skins: StakePayload | None = None
    nassau: NassauPayload | None = None
    per_stroke: StakePayload | None = Field(default=None, alias="perStroke")
    kps: StakePayload | None = None


class SettleRequest(BaseModel):
    round: RoundPayload
    wagers: WagersPayload | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "round": {
                        "players": [{"id": "p1", "name": "Alice"}, {"id": "p2", "name": "Bob"}],
                        "holes": [{"scores": {"p1": 4, "p2": 5}}],
                    },
                    "wagers": {
                        "enabled": True,
                        "skins": {"enabled": True, "amount": 5},
                        "nassau": {"enabled": True, "front": 10, "back": 10, "total": 20},
                        "perStroke": {"enabled": False, "amount": 0},
                    },
                }
            ]
        }
    }

    def round_record(self) -> dict[str, Any]:
        return self.round.model_dump(exclude_none=True)

    def wager_config(self) -> dict[str, Any] | None:
        if self.wagers is None:
            return None
        return self.wagers.model_dump(by_alias=True, exclude_none=True)


class TransferResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_player: str = Field(alias="from")
    to_player: str = Field(alias="to")
    amount: float


class GameResponse(BaseModel):
    type: str
    key: str
    data: dict[str, Any]


class SettlementResponse(BaseModel):
    id: int | None = None
    round_id: str | None = None
    balances: dict[str, float]
    transfers: list[TransferResponse]
    by_game: list[GameResponse]
    standings: list[str]
