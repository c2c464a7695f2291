import pytest

from golf_wagers.domain.money import split_evenly, to_cents
from golf_wagers.domain.wagers import WagerConfig


@pytest.mark.parametrize(
    "raw, expected",
    [
        (5, 500),
        ("2.50", 250),
        (0.1, 10),
        ("", 0),
        (None, 0),
        ("abc", 0),
        (-5, 0),
        (float("nan"), 0),
        (True, 0),
        ("1e999999", 0),
    ],
)
def test_to_cents_degrades_bad_amounts_to_zero(raw, expected) -> None:
    assert to_cents(raw) == expected


def test_split_evenly_hands_out_remainder_in_order() -> None:
    assert split_evenly(10, 3) == [4, 3, 3]
    assert split_evenly(9, 3) == [3, 3, 3]


def test_parse_full_configuration() -> None:
    config = WagerConfig.from_mapping(
        {
            "enabled": True,
            "skins": {"enabled": True, "amount": 5},
            "nassau": {"enabled": True, "front": "10", "back": 0, "total": 20},
            "perStroke": {"enabled": True, "amount": 0.5},
            "kps": {"enabled": False, "amount": 5},
        }
    )

    assert config.skins.active and config.skins.amount_cents == 500
    assert config.nassau.active
    assert (config.nassau.front_cents, config.nassau.back_cents, config.nassau.total_cents) == (1000, 0, 2000)
    assert config.per_stroke.amount_cents == 50
    assert not config.kps.active


def test_missing_and_disabled_sections_stay_off() -> None:
    config = WagerConfig.from_mapping({"enabled": True, "per_stroke": {"amount": 1}, "nassau": {"enabled": True}})

    assert config.enabled
    assert not config.skins.active
    assert not config.per_stroke.active
    assert not config.nassau.active


@pytest.mark.parametrize("raw", [None, "skins", 5])
def test_non_mapping_configuration_means_nothing_to_settle(raw) -> None:
    assert WagerConfig.from_mapping(raw) is None


def test_configuration_without_top_level_flag_is_off() -> None:
    config = WagerConfig.from_mapping({"skins": {"enabled": True, "amount": 5}})

    assert not config.enabled
    assert config.skins.active
