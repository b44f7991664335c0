"""Validation errors raised by the trading models."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

_QUANTITY_MIN = 1
_QUANTITY_MAX = 500_000
_MARGIN_MIN = 1
_LEVERAGE_MIN = 1
_LEVERAGE_MAX = 100
_PERCENTAGE_CAPPED_MIN = 0
_PERCENTAGE_CAPPED_MAX = 100
_PERCENTAGE_MIN = 0
_PERCENTAGE_MAX = 10_000
_PRICE_MIN = 1
_PRICE_MAX = 100_000_000


def _fmt(value: Any) -> str:
    """Render a number the way the API messages expect: no trailing '.0', no exponent."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        text = str(int(value))
        return "-0" if value == 0 and math.copysign(1.0, value) < 0 else text
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


# Quantity


class QuantityValidationError(ValueError):
    """A value is not a valid quantity."""


class QuantityTooLowError(QuantityValidationError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Quantity must be at least {_QUANTITY_MIN}. Value: {_fmt(value)}")


class QuantityTooHighError(QuantityValidationError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(
            f"Quantity must be less than or equal to {_QUANTITY_MAX}. Value: {_fmt(value)}"
        )


class QuantityNotAnIntegerError(QuantityValidationError):
    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Quantity must be an integer. Value: {_fmt(value)}")


# Margin


class MarginValidationError(ValueError):
    """A value is not a valid margin."""


class MarginTooLowError(MarginValidationError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Margin must be at least {_MARGIN_MIN}. Value: {_fmt(value)}")


class MarginNotFiniteError(MarginValidationError):
    def __init__(self) -> None:
        super().__init__("Margin must be a finite number")


class MarginNotAnIntegerError(MarginValidationError):
    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Margin must be an integer. Value: {_fmt(value)}")


# Leverage


class LeverageValidationError(ValueError):
    """A value is not a valid leverage."""


class LeverageTooLowError(LeverageValidationError):
    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Leverage must be at least {_LEVERAGE_MIN}. Value: {_fmt(value)}")


class LeverageTooHighError(LeverageValidationError):
    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Leverage must be at most {_LEVERAGE_MAX}. Value: {_fmt(value)}")


# Capped percentage


class PercentageCappedValidationError(ValueError):
    """A value is not a valid capped percentage."""


class PercentageCappedBelowMinimumError(PercentageCappedValidationError):
    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(
            f"PercentageCapped must be at least {_PERCENTAGE_CAPPED_MIN}. Value: {_fmt(value)}"
        )


class PercentageCappedAboveMaximumError(PercentageCappedValidationError):
    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(
            f"PercentageCapped must be at most {_PERCENTAGE_CAPPED_MAX}. Value: {_fmt(value)}"
        )


# Percentage


class PercentageValidationError(ValueError):
    """A value is not a valid percentage."""


class PercentageBelowMinimumError(PercentageValidationError):
    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Percentage must be at least {_PERCENTAGE_MIN}. Value: {_fmt(value)}")


class PercentageAboveMaximumError(PercentageValidationError):
    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Percentage must be at most {_PERCENTAGE_MAX}. Value: {_fmt(value)}")


class PercentageNotFiniteError(PercentageValidationError):
    def __init__(self) -> None:
        super().__init__("Percentage must be a finite number")


# Price


class PriceValidationError(ValueError):
    """A value is not a valid price."""


class PriceTooLowError(PriceValidationError):
    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Price must be at least {_PRICE_MIN}. Value: {_fmt(value)}")


class PriceNotMultipleOfTickError(PriceValidationError):
    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Price must be a multiple of 0.5. Value: {_fmt(value)}")


class PriceTooHighError(PriceValidationError):
    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Price must be at most {_PRICE_MAX}. Value: {_fmt(value)}")


# Trade


class TradeValidationError(ValueError):
    """Trade parameters are inconsistent."""


class StoplossBelowLiquidationLongError(TradeValidationError):
    def __init__(self, stoploss: Any, liquidation: Any) -> None:
        self.stoploss = stoploss
        self.liquidation = liquidation
        super().__init__(
            f"Stoploss ({_fmt(stoploss)}) can't be below liquidation price "
            f"({_fmt(liquidation)}) for long positions"
        )


class StoplossAboveEntryForLongError(TradeValidationError):
    def __init__(self, stoploss: Any, entry_price: Any) -> None:
        self.stoploss = stoploss
        self.entry_price = entry_price
        super().__init__(
            f"Stoploss ({_fmt(stoploss)}) can't be above entry price "
            f"({_fmt(entry_price)}) for long positions"
        )


class TakeprofitBelowEntryForLongError(TradeValidationError):
    def __init__(self, takeprofit: Any, entry_price: Any) -> None:
        self.takeprofit = takeprofit
        self.entry_price = entry_price
        super().__init__(
            f"Takeprofit ({_fmt(takeprofit)}) can't be below entry price "
            f"({_fmt(entry_price)}) for long positions"
        )


class StoplossAboveLiquidationShortError(TradeValidationError):
    def __init__(self, stoploss: Any, liquidation: Any) -> None:
        self.stoploss = stoploss
        self.liquidation = liquidation
        super().__init__(
            f"Stoploss ({_fmt(stoploss)}) can't be above liquidation price "
            f"({_fmt(liquidation)}) for short positions"
        )


class StoplossBelowEntryForShortError(TradeValidationError):
    def __init__(self, stoploss: Any, entry_price: Any) -> None:
        self.stoploss = stoploss
        self.entry_price = entry_price
        super().__init__(
            f"Stoploss ({_fmt(stoploss)}) can't be below entry price "
            f"({_fmt(entry_price)}) for short positions"
        )


class TakeprofitAboveEntryForShortError(TradeValidationError):
    def __init__(self, takeprofit: Any, entry_price: Any) -> None:
        self.takeprofit = takeprofit
        self.entry_price = entry_price
        super().__init__(
            f"Takeprofit ({_fmt(takeprofit)}) can't be above entry price "
            f"({_fmt(entry_price)}) for short positions"
        )


class TradeParamsInvalidQuantityError(TradeValidationError):
    def __init__(self, source: QuantityValidationError) -> None:
        self.source = source
        super().__init__(f"Trade params result in invalid quantity: {source}")


class NewStoplossNotBelowMarketForLongError(TradeValidationError):
    def __init__(self, new_stoploss: Any, market_price: Any) -> None:
        self.new_stoploss = new_stoploss
        self.market_price = market_price
        super().__init__(
            f"New stoploss ({_fmt(new_stoploss)}) must be below market price "
            f"({_fmt(market_price)}) for long positions"
        )


class NewStoplossNotBelowTakeprofitForLongError(TradeValidationError):
    def __init__(self, new_stoploss: Any, takeprofit: Any) -> None:
        self.new_stoploss = new_stoploss
        self.takeprofit = takeprofit
        super().__init__(
            f"New stoploss ({_fmt(new_stoploss)}) must be below takeprofit "
            f"({_fmt(takeprofit)}) for long positions"
        )


class NewStoplossNotAboveMarketForShortError(TradeValidationError):
    def __init__(self, new_stoploss: Any, market_price: Any) -> None:
        self.new_stoploss = new_stoploss
        self.market_price = market_price
        super().__init__(
            f"New stoploss ({_fmt(new_stoploss)}) must be above market price "
            f"({_fmt(market_price)}) for short positions"
        )


class NewStoplossNotAboveTakeprofitForShortError(TradeValidationError):
    def __init__(self, new_stoploss: Any, takeprofit: Any) -> None:
        self.new_stoploss = new_stoploss
        self.takeprofit = takeprofit
        super().__init__(
            f"New stoploss ({_fmt(new_stoploss)}) must be above takeprofit "
            f"({_fmt(takeprofit)}) for short positions"
        )


class AddedMarginInvalidLeverageError(TradeValidationError):
    def __init__(self, source: LeverageValidationError) -> None:
        self.source = source
        super().__init__(f"Added margin results in invalid leverage: {source}")


class CashInInvalidMarginError(TradeValidationError):
    def __init__(self, source: MarginValidationError) -> None:
        self.source = source
        super().__init__(f"Cash-in results in invalid margin: {source}")


class CashInInvalidLeverageError(TradeValidationError):
    def __init__(self, source: LeverageValidationError) -> None:
        self.source = source
        super().__init__(f"Cash-in results in invalid leverage: {source}")


class LiquidationNotBelowPriceForLongError(TradeValidationError):
    def __init__(self, liquidation: Any, price: Any) -> None:
        self.liquidation = liquidation
        self.price = price
        super().__init__(
            f"Liquidation ({_fmt(liquidation)}) must be below price "
            f"({_fmt(price)}) for long positions"
        )


class LiquidationNotAbovePriceForShortError(TradeValidationError):
    def __init__(self, liquidation: Any, price: Any) -> None:
        self.liquidation = liquidation
        self.price = price
        super().__init__(
            f"Liquidation ({_fmt(liquidation)}) must be above price "
            f"({_fmt(price)}) for short positions"
        )