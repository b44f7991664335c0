"""Validated margin values (collateral in satoshis)."""

from __future__ import annotations

import math
import numbers
from typing import Any, ClassVar

from .errors import (
    LiquidationNotAbovePriceForShortError,
    LiquidationNotBelowPriceForLongError,
    MarginNotAnIntegerError,
    MarginNotFiniteError,
    MarginTooLowError,
)
from .price import _round_half_away
from .quantity import _number, _saturating_u64
from .side import SATS_PER_BTC, TradeSide

__all__ = ["Margin"]


class Margin:
    """A whole number of satoshis, at least 1."""

    __slots__ = ("_value",)

    MIN: ClassVar[Margin]
    _LOW: ClassVar[int] = 1

    def __init__(self, value: Any) -> None:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"expected a real number, got {type(value).__name__}")
        if isinstance(value, numbers.Integral):
            as_int = max(int(value), 0)
        else:
            as_float = float(value)
            # A non-finite value has no integral part, so it is reported as such.
            if not math.isfinite(as_float) or not as_float.is_integer():
                raise MarginNotAnIntegerError(as_float)
            if not math.isfinite(as_float):
                raise MarginNotFiniteError()
            as_int = _saturating_u64(as_float)
        if as_int < self._LOW:
            raise MarginTooLowError(as_int)
        object.__setattr__(self, "_value", as_int)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Margin is immutable")

    @property
    def value(self) -> int:
        """The margin in satoshis."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __float__(self) -> float:
        return float(self._value)

    def __add__(self, other: object) -> Margin:
        if not isinstance(other, Margin):
            return NotImplemented
        return Margin(self._value + other._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Margin):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("Margin", self._value))

    def _check(self, other: object) -> int:
        if not isinstance(other, Margin):
            raise TypeError(f"cannot compare Margin with {type(other).__name__}")
        return other._value

    def __lt__(self, other: object) -> bool:
        return self._value < self._check(other)

    def __le__(self, other: object) -> bool:
        return self._value <= self._check(other)

    def __gt__(self, other: object) -> bool:
        return self._value > self._check(other)

    def __ge__(self, other: object) -> bool:
        return self._value >= self._check(other)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Margin({self._value})"

    @classmethod
    def bounded(cls, value: Any) -> Margin:
        """Round ``value`` to the nearest integer and raise it to at least MIN."""
        rounded = _saturating_u64(_round_half_away(_number(value)))
        return cls(max(rounded, cls._LOW))

    @classmethod
    def calculate(cls, quantity: Any, price: Any, leverage: Any) -> Margin:
        """Margin from quantity (USD), price (USD/BTC) and leverage.

        margin = ceil(quantity * SATS_PER_BTC / (price * leverage))
        """
        margin = _number(quantity) * (SATS_PER_BTC / (_number(price) * _number(leverage)))
        ceiled = float(math.ceil(margin)) if math.isfinite(margin) else margin
        return cls(_saturating_u64(ceiled))

    @classmethod
    def est_from_liquidation_price(
        cls, side: TradeSide, quantity: Any, price: Any, liquidation: Any
    ) -> Margin:
        """Estimate the margin giving ``liquidation`` for a position entered at ``price``.

        For longs the liquidation must be below the price, for shorts above it.
        """
        side = TradeSide(side)
        if side is TradeSide.BUY and liquidation >= price:
            raise LiquidationNotBelowPriceForLongError(liquidation, price)
        if side is TradeSide.SELL and liquidation <= price:
            raise LiquidationNotAbovePriceForShortError(liquidation, price)

        a = 1.0 / _number(price)
        if side is TradeSide.BUY:
            b = 1.0 / _number(liquidation) - a
        else:
            b = a - 1.0 / _number(liquidation)

        if not b > 0.0:
            raise AssertionError("'b' must be positive from validations above")

        floored_margin = b * SATS_PER_BTC * _number(quantity)
        return cls(_saturating_u64(float(math.ceil(floored_margin))))


Margin.MIN = Margin(1)