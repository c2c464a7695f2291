import json

import pytest

from golf_wagers.domain.engine import KP_UNAVAILABLE_NOTE, EngineConfig, settle_round
from golf_wagers.domain.skins import CarryPolicy

WAGERS = {
    "enabled": True,
    "skins": {"enabled": True, "amount": 1},
    "nassau": {"enabled": True, "front": 10, "back": 10, "total": 20},
    "perStroke": {"enabled": True, "amount": 0.5},
    "kps": {"enabled": True, "amount": 2},
}


@pytest.fixture
def round_record(make_round) -> dict:
    return make_round(
        {
            "p1": [4] * 9 + [5] * 9,
            "p2": [4] * 18,
            "p3": [5] * 9 + [4] * 9,
        }
    )


def test_settles_every_enabled_game(round_record) -> None:
    result = settle_round(round_record, WAGERS)

    assert result.balances == {"p1": -29.5, "p2": 59.0, "p3": -29.5}
    assert [transfer.to_dict() for transfer in result.transfers] == [
        {"from": "p1", "to": "p2", "amount": 29.5},
        {"from": "p3", "to": "p2", "amount": 29.5},
    ]
    assert [game.type for game in result.by_game] == ["skins", "nassau", "perStroke", "kps"]
    assert result.standings == ["p2", "p1", "p3"]


def test_each_game_contribution_nets_to_zero(round_record) -> None:
    result = settle_round(round_record, WAGERS, EngineConfig(strict=True, carry_policy=CarryPolicy.SPLIT))

    for game in result.by_game:
        if game.type == "kps":
            continue
        assert abs(sum(game.data["balances"].values())) < 1e-6


def test_skins_detail_reports_forfeited_carry(round_record) -> None:
    skins = settle_round(round_record, WAGERS).by_game[0]

    assert skins.data["unclaimed_carry"] == 18
    assert all(detail["winner"] is None for detail in skins.data["details"])
    assert skins.data["balances"] == {"p1": 0.0, "p2": 0.0, "p3": 0.0}


def test_split_policy_pays_carry_to_final_tied_players(round_record) -> None:
    result = settle_round(round_record, WAGERS, EngineConfig(carry_policy=CarryPolicy.SPLIT))
    skins = result.by_game[0]

    assert skins.data["balances"] == {"p1": -18.0, "p2": 9.0, "p3": 9.0}
    assert skins.data["details"][-1]["shared_by"] == ["p2", "p3"]
    assert result.balances == {"p1": -47.5, "p2": 68.0, "p3": -20.5}


def test_kp_is_reported_as_unavailable(round_record) -> None:
    result = settle_round(round_record, {"enabled": True, "kps": {"enabled": True, "amount": 5}})

    assert [game.to_dict() for game in result.by_game] == [
        {"type": "kps", "key": "KPs", "data": {"available": False, "note": KP_UNAVAILABLE_NOTE}}
    ]
    assert result.balances == {"p1": 0.0, "p2": 0.0, "p3": 0.0}
    assert result.transfers == []


@pytest.mark.parametrize(
    "wagers",
    [
        None,
        {"enabled": False, "skins": {"enabled": True, "amount": 5}},
        {"skins": {"enabled": True, "amount": 5}},
    ],
)
def test_missing_or_disabled_wagers_produce_empty_result(round_record, wagers) -> None:
    result = settle_round(round_record, wagers)

    assert result.to_dict() == {"balances": {}, "transfers": [], "by_game": [], "standings": []}


def test_disabled_games_are_skipped(round_record) -> None:
    result = settle_round(
        round_record,
        {"enabled": True, "skins": {"enabled": False, "amount": 5}, "perStroke": {"enabled": True, "amount": 1}},
    )

    assert [game.type for game in result.by_game] == ["perStroke"]
    assert result.balances == {"p1": -9.0, "p2": 18.0, "p3": -9.0}


def test_identical_inputs_give_identical_output(round_record) -> None:
    first = json.dumps(settle_round(round_record, WAGERS).to_dict(), sort_keys=False)
    second = json.dumps(settle_round(round_record, WAGERS).to_dict(), sort_keys=False)

    assert first == second


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("GOLF_WAGERS_STRICT", "yes")
    monkeypatch.setenv("GOLF_WAGERS_CARRY_POLICY", "Last_Winner")

    assert EngineConfig.from_env() == EngineConfig(strict=True, carry_policy=CarryPolicy.LAST_WINNER)

    monkeypatch.setenv("GOLF_WAGERS_CARRY_POLICY", "double-or-nothing")
    monkeypatch.delenv("GOLF_WAGERS_STRICT")

    assert EngineConfig.from_env() == EngineConfig()


def test_oversized_stake_is_treated_as_no_stake(round_record) -> None:
    result = settle_round(round_record, {"enabled": True, "skins": {"enabled": True, "amount": "1e999999"}})

    assert result.by_game == []
    assert result.balances == {"p1": 0.0, "p2": 0.0, "p3": 0.0}


def test_transfers_are_listed_largest_first(make_round) -> None:
    round_record = make_round(
        {
            "a": [4] * 17 + [12],
            "b": [4] * 17 + [12],
            "c": [4] * 17 + [22],
            "d": [4] * 17 + [17],
        }
    )

    result = settle_round(round_record, {"enabled": True, "perStroke": {"enabled": True, "amount": 1}})

    assert result.balances == {"a": 7.5, "b": 7.5, "c": -10.0, "d": -5.0}
    assert [transfer.to_dict() for transfer in result.transfers] == [
        {"from": "c", "to": "a", "amount": 7.5},
        {"from": "d", "to": "b", "amount": 5.0},
        {"from": "c", "to": "b", "amount": 2.5},
    ]
