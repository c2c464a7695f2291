"""Stroke lookup over the two legacy hole layouts a round record may use.

Rounds saved by older clients store ``holes`` as a mapping keyed by hole number::

    {"1": {"players": {"p1": {"strokes": 4}}}, "2": {"scores": {"p1": 5}}}

while newer ones store an ordered list where index 0 is hole 1::

    [{"scores": {"p1": 4}}, {"strokes": {"p1": 5}}]

``StrokeLedger.from_round`` normalizes either layout once so that every
calculator reads strokes through the same lookup.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from .rounds import HOLES, normalize_player_id

UNRECORDED = 0


def parse_strokes(value: Any) -> int:
    """Return a positive stroke count, or ``UNRECORDED`` for anything else."""
    if isinstance(value, bool) or value is None:
        return UNRECORDED
    if isinstance(value, int):
        return value if value > 0 else UNRECORDED
    if isinstance(value, float):
        if value.is_integer() and value > 0:
            return int(value)
        return UNRECORDED
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit() and text.isascii():
            return int(text) or UNRECORDED
    return UNRECORDED


def _player_strokes(mapping: Any) -> dict[str, int]:
    if not isinstance(mapping, Mapping):
        return {}
    return {normalize_player_id(pid): parse_strokes(value) for pid, value in mapping.items()}


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


class HoleSchema(Protocol):
    def accepts(self, holes: Any) -> bool: ...

    def read(self, holes: Any) -> dict[int, dict[str, int]]: ...


class KeyedHoleSchema:
    """``holes`` keyed by hole number with ``players.<pid>.strokes`` or ``scores.<pid>``."""

    def accepts(self, holes: Any) -> bool:
        return isinstance(holes, Mapping)

    def read(self, holes: Any) -> dict[int, dict[str, int]]:
        ledger: dict[int, dict[str, int]] = {}
        for hole in HOLES:
            entry = holes.get(str(hole), holes.get(hole))
            if not isinstance(entry, Mapping):
                continue
            strokes = _player_strokes(entry.get("scores"))
            players = entry.get("players")
            if isinstance(players, Mapping):
                for pid, player_entry in players.items():
                    value = player_entry.get("strokes") if isinstance(player_entry, Mapping) else None
                    parsed = parse_strokes(value)
                    if parsed:
                        strokes[normalize_player_id(pid)] = parsed
            ledger[hole] = strokes
        return ledger


class ListedHoleSchema:
    """``holes`` as an ordered list, index 0 being hole 1."""

    def accepts(self, holes: Any) -> bool:
        return _is_sequence(holes)

    def read(self, holes: Any) -> dict[int, dict[str, int]]:
        ledger: dict[int, dict[str, int]] = {}
        for hole, entry in zip(HOLES, holes):
            if not isinstance(entry, Mapping):
                continue
            strokes = _player_strokes(entry.get("strokes"))
            for pid, value in _player_strokes(entry.get("scores")).items():
                if value:
                    strokes[pid] = value
            ledger[hole] = strokes
        return ledger


HOLE_SCHEMAS: tuple[HoleSchema, ...] = (KeyedHoleSchema(), ListedHoleSchema())


@dataclass(frozen=True)
class StrokeLedger:
    strokes: Mapping[int, Mapping[str, int]] = field(default_factory=dict)

    @classmethod
    def from_round(cls, round_record: Mapping[str, Any] | None) -> "StrokeLedger":
        holes = round_record.get("holes") if isinstance(round_record, Mapping) else None
        for schema in HOLE_SCHEMAS:
            if schema.accepts(holes):
                return cls(strokes=schema.read(holes))
        return cls()

    def stroke_of(self, hole: int, player_id: str) -> int:
        if not isinstance(hole, int) or isinstance(hole, bool):
            return UNRECORDED
        return self.strokes.get(hole, {}).get(normalize_player_id(player_id), UNRECORDED)

    def total_of(self, player_id: str, holes: Iterable[int] = HOLES) -> int:
        # unrecorded holes add nothing rather than counting as a scored zero
        return sum(self.stroke_of(hole, player_id) for hole in holes)

    def recorded_holes(self, player_id: str) -> int:
        return sum(1 for hole in HOLES if self.stroke_of(hole, player_id) > UNRECORDED)

    def is_complete(self, hole: int, player_ids: Iterable[str]) -> bool:
        return all(self.stroke_of(hole, player_id) > UNRECORDED for player_id in player_ids)


def stroke_of(round_record: Mapping[str, Any] | None, hole: int, player_id: str) -> int:
    return StrokeLedger.from_round(round_record).stroke_of(hole, player_id)


def total_of(round_record: Mapping[str, Any] | None, player_id: str) -> int:
    return StrokeLedger.from_round(round_record).total_of(player_id)
