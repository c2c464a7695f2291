import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest


def _holes(strokes_by_player: dict[str, list]) -> list[dict]:
    holes = []
    for idx in range(18):
        scores = {}
        for player_id, strokes in strokes_by_player.items():
            if idx < len(strokes) and strokes[idx] is not None:
                scores[player_id] = strokes[idx]
        holes.append({"scores": scores})
    return holes


@pytest.fixture
def make_round():
    def factory(strokes_by_player: dict[str, list]) -> dict:
        return {
            "id": "round-1",
            "players": [{"id": player_id, "name": player_id.upper()} for player_id in strokes_by_player],
            "holes": _holes(strokes_by_player),
        }

    return factory
