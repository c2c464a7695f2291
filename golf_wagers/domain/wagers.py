from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .money import to_cents


def _section(raw: Mapping[str, Any], *keys: str) -> Mapping[str, Any]:
    for key in keys:
        value = raw.get(key)
        if isinstance(value, Mapping):
            return value
    return {}


@dataclass(frozen=True)
class StakeWager:
    enabled: bool = False
    amount_cents: int = 0

    @property
    def active(self) -> bool:
        return self.enabled and self.amount_cents > 0

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "StakeWager":
        return cls(enabled=bool(raw.get("enabled")), amount_cents=to_cents(raw.get("amount")))


@dataclass(frozen=True)
class NassauWager:
    enabled: bool = False
    front_cents: int = 0
    back_cents: int = 0
    total_cents: int = 0

    @property
    def active(self) -> bool:
        return self.enabled and max(self.front_cents, self.back_cents, self.total_cents) > 0

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "NassauWager":
        return cls(
            enabled=bool(raw.get("enabled")),
            front_cents=to_cents(raw.get("front")),
            back_cents=to_cents(raw.get("back")),
            total_cents=to_cents(raw.get("total")),
        )


@dataclass(frozen=True)
class WagerConfig:
    enabled: bool = False
    skins: StakeWager = field(default_factory=StakeWager)
    nassau: NassauWager = field(default_factory=NassauWager)
    per_stroke: StakeWager = field(default_factory=StakeWager)
    kps: StakeWager = field(default_factory=StakeWager)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "WagerConfig | None":
        """Parse a stored wager configuration; ``None`` when there is nothing to settle."""
        if not isinstance(raw, Mapping):
            return None
        return cls(
            enabled=bool(raw.get("enabled")),
            skins=StakeWager.from_mapping(_section(raw, "skins")),
            nassau=NassauWager.from_mapping(_section(raw, "nassau")),
            per_stroke=StakeWager.from_mapping(_section(raw, "perStroke", "per_stroke")),
            kps=StakeWager.from_mapping(_section(raw, "kps")),
        )
