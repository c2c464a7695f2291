from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

HOLES = tuple(range(1, 19))
FRONT_NINE = tuple(range(1, 10))
BACK_NINE = tuple(range(10, 19))


@dataclass(frozen=True)
class Player:
    id: str
    name: str


def normalize_player_id(value: Any) -> str:
    return str(value).strip()


def players_from_round(round_record: Mapping[str, Any] | None) -> list[Player]:
    """Read the ordered roster of a round, keeping the first entry for a repeated id."""
    raw_players = round_record.get("players") if isinstance(round_record, Mapping) else None
    if not isinstance(raw_players, Sequence) or isinstance(raw_players, (str, bytes)):
        return []

    players: list[Player] = []
    seen: set[str] = set()
    for idx, raw in enumerate(raw_players):
        entry = raw if isinstance(raw, Mapping) else {}
        raw_id = entry.get("id")
        player_id = normalize_player_id(raw_id if raw_id is not None else idx)
        if not player_id or player_id in seen:
            continue
        seen.add(player_id)
        name = str(entry.get("name") or f"Player {idx + 1}")
        players.append(Player(id=player_id, name=name))
    return players
