import pytest

from golf_wagers.domain.settlement import Transfer, settle


def _replay(balances: dict, transfers: list[Transfer]) -> dict:
    residual = dict(balances)
    for transfer in transfers:
        residual[transfer.from_player] += transfer.amount
        residual[transfer.to_player] -= transfer.amount
    return residual


def test_largest_debtor_pays_largest_creditor_first() -> None:
    transfers = settle({"a": 30, "b": -10, "c": -20})

    assert [transfer.to_dict() for transfer in transfers] == [
        {"from": "c", "to": "a", "amount": 20},
        {"from": "b", "to": "a", "amount": 10},
    ]


def test_equal_amounts_keep_input_order() -> None:
    transfers = settle({"a": 10, "b": 10, "c": -10, "d": -10})

    assert [(t.from_player, t.to_player) for t in transfers] == [("c", "a"), ("d", "b")]


@pytest.mark.parametrize(
    "balances",
    [
        {"a": 12.5, "b": -7.25, "c": -5.25},
        {"a": 59.0, "b": -29.5, "c": -29.5},
        {"a": 0.1, "b": 0.2, "c": -0.3},
        {"a": 40, "b": -15, "c": 5, "d": -30},
    ],
)
def test_replaying_transfers_clears_every_balance(balances: dict) -> None:
    transfers = settle(balances)

    assert all(transfer.amount > 0 for transfer in transfers)
    assert all(abs(amount) < 1e-6 for amount in _replay(balances, transfers).values())


def test_near_zero_balances_are_ignored() -> None:
    assert settle({}) == []
    assert settle({"a": 1e-9, "b": -1e-9}) == []
