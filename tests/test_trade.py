import pytest

from lnm_sdk.errors import MarginTooLowError, QuantityTooLowError, PriceNotMultipleOfTickError
from lnm_sdk.leverage import Leverage
from lnm_sdk.margin import Margin
from lnm_sdk.price import Price
from lnm_sdk.quantity import Quantity
from lnm_sdk.side import TradeExecutionType
from lnm_sdk.trade import TradeExecution, TradeSize


def test_quantity_size_from_number():
    size = TradeSize.quantity(1)
    assert size.value == Quantity(1)
    assert size.is_quantity


def test_margin_size_from_number():
    size = TradeSize.margin(10_000)
    assert size.value == Margin(10_000)
    assert not size.is_quantity


def test_size_from_model_values():
    assert TradeSize(Quantity(1_000)) == TradeSize.quantity(Quantity(1_000))
    assert TradeSize(Margin(10_000)) == TradeSize.margin(Margin(10_000))


def test_invalid_quantity_size():
    with pytest.raises(QuantityTooLowError):
        TradeSize.quantity(0)


def test_invalid_margin_size():
    with pytest.raises(MarginTooLowError):
        TradeSize.margin(0)


def test_size_rejects_other_types():
    with pytest.raises(TypeError):
        TradeSize(100)


def test_display():
    assert str(TradeSize.quantity(1_000)) == "Quantity(1000)"
    assert str(TradeSize.margin(10_000)) == "Margin(10000)"


def test_quantity_size_to_quantity_and_margin():
    size = TradeSize.quantity(100)
    price = Price(100_000)
    leverage = Leverage(10)
    quantity, margin = size.to_quantity_and_margin(price, leverage)
    assert quantity == Quantity(100)
    assert margin == Margin.calculate(Quantity(100), price, leverage)


def test_margin_size_to_quantity_and_margin():
    size = TradeSize.margin(10_000)
    quantity, margin = size.to_quantity_and_margin(Price(100_000), Leverage(10))
    assert quantity == Quantity(100)
    assert margin == Margin(10_000)


def test_quantity_margin_round_trip():
    price = Price(100_000)
    leverage = Leverage(10)
    _, margin = TradeSize.quantity(100).to_quantity_and_margin(price, leverage)
    quantity, _ = TradeSize.margin(margin).to_quantity_and_margin(price, leverage)
    assert quantity == Quantity(100)


def test_margin_size_too_small_for_quantity():
    size = TradeSize.margin(9)
    with pytest.raises(QuantityTooLowError):
        size.to_quantity_and_margin(Price(100_000), Leverage(100))


def test_market_execution_type():
    execution = TradeExecution.market()
    assert execution.price is None
    assert execution.to_type() is TradeExecutionType.MARKET


def test_limit_execution_type():
    execution = TradeExecution.limit(Price(100_000))
    assert execution.price == Price(100_000)
    assert execution.to_type() is TradeExecutionType.LIMIT


def test_limit_from_number_validates():
    assert TradeExecution.limit(100_000) == TradeExecution(Price(100_000))
    with pytest.raises(PriceNotMultipleOfTickError):
        TradeExecution.limit(100_000.25)


def test_execution_rejects_plain_numbers():
    with pytest.raises(TypeError):
        TradeExecution(100_000)