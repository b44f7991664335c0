import math

import pytest

from lnm_sdk.errors import LeverageTooHighError, LeverageTooLowError, LeverageValidationError
from lnm_sdk.leverage import Leverage
from lnm_sdk.price import Price
from lnm_sdk.quantity import Quantity


def test_construct_from_float():
    assert Leverage(10.0).value == 10.0


def test_construct_from_int():
    assert Leverage(25).value == 25.0


@pytest.mark.parametrize("value", [0.5, 0, -3])
def test_too_low(value):
    with pytest.raises(LeverageTooLowError):
        Leverage(value)


@pytest.mark.parametrize("value", [150.0, 100.01])
def test_too_high(value):
    with pytest.raises(LeverageTooHighError):
        Leverage(value)


def test_nan_is_rejected():
    with pytest.raises(LeverageValidationError):
        Leverage(math.nan)


def test_bounds_are_inclusive():
    assert Leverage(1).value == Leverage.MIN.value
    assert Leverage(100).value == Leverage.MAX.value


def test_bounded():
    assert Leverage.bounded(25.0).value == 25.0
    assert Leverage.bounded(0.5) == Leverage.MIN
    assert Leverage.bounded(150.0) == Leverage.MAX


def test_ordering_and_equality():
    assert Leverage(2) < Leverage(3)
    assert Leverage(5) == Leverage(5.0)
    assert max(Leverage(7), Leverage(3)) == Leverage(7)


def test_display_without_trailing_zero():
    assert str(Leverage(10.0)) == "10"


def test_try_calculate_round_trips_with_quantity():
    quantity = Quantity(1_000)
    price = Price(100_000.0)
    leverage = Leverage.try_calculate(quantity, 20_000, price)
    assert Quantity.try_calculate(20_000, price, leverage) == quantity


def test_try_calculate_too_low():
    with pytest.raises(LeverageTooLowError):
        Leverage.try_calculate(Quantity(1), 100_000_000, Price(100_000))


def test_try_calculate_too_high():
    with pytest.raises(LeverageTooHighError):
        Leverage.try_calculate(Quantity(500_000), 1, Price(100_000))


def test_immutable():
    leverage = Leverage(3)
    with pytest.raises(AttributeError):
        leverage._value = 4.0
    assert leverage.value == 3.0