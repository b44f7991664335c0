import math

import pytest

from lnm_sdk.errors import (
    PercentageAboveMaximumError,
    PercentageBelowMinimumError,
    PercentageCappedAboveMaximumError,
    PercentageCappedBelowMinimumError,
    PercentageCappedValidationError,
    PercentageNotFiniteError,
    PriceNotMultipleOfTickError,
    PriceTooHighError,
    PriceTooLowError,
    PriceValidationError,
)
from lnm_sdk.price import Percentage, PercentageCapped, Price


# PercentageCapped


def test_percentage_capped_valid_value():
    assert PercentageCapped(50.0).value == 50.0
    assert PercentageCapped(25.5).value == 25.5


def test_percentage_capped_out_of_range():
    with pytest.raises(PercentageCappedBelowMinimumError):
        PercentageCapped(-0.01)
    with pytest.raises(PercentageCappedAboveMaximumError):
        PercentageCapped(100.1)


def test_percentage_capped_errors_share_base():
    with pytest.raises(PercentageCappedValidationError):
        PercentageCapped(101)


@pytest.mark.parametrize(
    "raw, expected", [(50.0, 50.0), (150.0, 100.0), (-10.0, 0.0)]
)
def test_percentage_capped_bounded(raw, expected):
    assert PercentageCapped.bounded(raw).value == expected


def test_percentage_capped_limits():
    assert PercentageCapped.MIN.value == 0.0
    assert PercentageCapped.MAX.value == 100.0
    assert PercentageCapped.bounded(1e9) == PercentageCapped.MAX


def test_percentage_capped_ordering():
    assert PercentageCapped(10) < PercentageCapped(20)
    assert sorted([PercentageCapped(30), PercentageCapped(5)])[0] == PercentageCapped(5)


# Percentage


def test_percentage_valid_value():
    assert Percentage(150.0).value == 150.0
    assert Percentage(200.0).value == 200.0


def test_percentage_out_of_range():
    with pytest.raises(PercentageBelowMinimumError):
        Percentage(-0.01)
    with pytest.raises(PercentageAboveMaximumError):
        Percentage(10_000.1)


def test_percentage_nan_rejected():
    with pytest.raises(PercentageNotFiniteError):
        Percentage(math.nan)


@pytest.mark.parametrize(
    "raw, expected", [(50.0, 50.0), (15_000.0, 10_000.0), (-10.0, 0.0)]
)
def test_percentage_bounded(raw, expected):
    assert Percentage.bounded(raw).value == expected


def test_percentage_from_capped():
    capped = PercentageCapped(42.5)
    assert Percentage(capped).value == capped.value


# Price


def test_price_valid_value():
    assert Price(100_000.0).value == 100_000.0
    assert Price(50_000.0).value == 50_000.0
    assert Price(95000) == Price(95000.0)


def test_price_out_of_range():
    with pytest.raises(PriceTooLowError):
        Price(0.5)
    with pytest.raises(PriceTooHighError):
        Price(150_000_000.0)


def test_price_not_multiple_of_tick():
    with pytest.raises(PriceNotMultipleOfTickError):
        Price(100_000.25)


def test_price_infinite_rejected():
    with pytest.raises(PriceTooHighError):
        Price(math.inf)
    with pytest.raises(PriceTooLowError):
        Price(-math.inf)


def test_price_error_message():
    with pytest.raises(PriceValidationError, match="Price must be at least 1. Value: 0.5"):
        Price(0.5)


def test_price_rejects_non_numbers():
    with pytest.raises(TypeError):
        Price("100")
    with pytest.raises(TypeError):
        Price(True)


def test_price_limits():
    assert Price.bounded(0).value == 1.0
    assert Price.bounded(1e12).value == 100_000_000.0
    assert Price.round(3 * Price.TICK).value == 1.5


def test_price_round_down():
    assert Price.round_down(100_000.8).value == 100_000.5


def test_price_round_up():
    assert Price.round_up(100_000.2).value == 100_000.5


def test_price_round():
    assert Price.round(100_000.6).value == 100_000.5
    assert Price.round(100_000.8).value == 100_001.0


def test_price_round_out_of_range():
    with pytest.raises(PriceTooLowError):
        Price.round(0.2)
    with pytest.raises(PriceTooHighError):
        Price.round_up(math.inf)


@pytest.mark.parametrize(
    "raw, expected",
    [(100_000.0, 100_000.0), (200_000_000.0, 100_000_000.0), (0.1, 1.0)],
)
def test_price_bounded(raw, expected):
    assert Price.bounded(raw).value == expected


@pytest.mark.parametrize("raw", [0.0, 1.3, 77.77, 12345.26, 99_999_999.9, 5e8])
def test_price_bounded_is_always_on_tick(raw):
    price = Price.bounded(raw)
    assert Price.MIN <= price <= Price.MAX
    assert (price.value / Price.TICK).is_integer()


@pytest.mark.parametrize("raw", [1.0, 2.5, 1234.5, 99_999.0])
def test_price_rounding_keeps_valid_prices(raw):
    assert Price.round(raw).value == raw
    assert Price.round_up(raw).value == raw
    assert Price.round_down(raw).value == raw


def test_price_apply_discount():
    price = Price(100_000.0)
    assert price.apply_discount(PercentageCapped(10.0)).value == 90_000.0


def test_price_apply_gain():
    price = Price(100_000.0)
    assert price.apply_gain(Percentage(20.0)).value == 120_000.0


def test_price_zero_adjustments_are_identity():
    price = Price(55_555.5)
    assert price.apply_discount(PercentageCapped.MIN) == price
    assert price.apply_gain(Percentage.MIN) == price


def test_price_ordering_and_hash():
    low, high = Price(90_000), Price(110_000)
    assert low < high
    assert high >= low
    assert max(low, high) == high
    assert len({Price(1.0), Price(1), Price(2)}) == 2


def test_price_not_comparable_with_other_types():
    with pytest.raises(TypeError):
        Price(2) < Percentage(3)
    assert Price(2) != Percentage(2)


def test_price_display_drops_trailing_zero():
    assert str(Price(100_000.0)) == "100000"
    assert str(Price(100_000.5)) == "100000.5"


def test_price_is_immutable():
    price = Price(10)
    with pytest.raises(AttributeError):
        price._value = 20.0
    assert price.value == 10.0


def test_price_float_conversion():
    assert float(Price(123.5)) == 123.5