"""Validated leverage values."""

from __future__ import annotations

import math
from typing import Any, ClassVar

from .errors import LeverageTooHighError, LeverageTooLowError
from .price import _FloatValue, _to_float
from .side import SATS_PER_BTC

__all__ = ["Leverage"]


def _number(value: Any) -> float:
    """Read a model value (or a plain number) as a float."""
    return float(getattr(value, "value", value))


class Leverage(_FloatValue):
    """A position leverage between 1x and 100x inclusive."""

    __slots__ = ()

    MIN: ClassVar[Leverage]
    MAX: ClassVar[Leverage]
    _LOW: ClassVar[float] = 1.0
    _HIGH: ClassVar[float] = 100.0

    def __init__(self, value: Any) -> None:
        as_float = _to_float(value)
        if math.isnan(as_float) or as_float < self._LOW:
            raise LeverageTooLowError(as_float)
        if as_float > self._HIGH:
            raise LeverageTooHighError(as_float)
        self._init_value(as_float)

    @classmethod
    def bounded(cls, value: Any) -> Leverage:
        """Clamp ``value`` into [MIN, MAX]."""
        return cls(min(max(_to_float(value), cls._LOW), cls._HIGH))

    @classmethod
    def try_calculate(cls, quantity: Any, margin: Any, price: Any) -> Leverage:
        """Leverage from quantity (USD), margin (sats) and price (USD/BTC).

        leverage = quantity * SATS_PER_BTC / (margin * price)
        """
        leverage = _number(quantity) * SATS_PER_BTC / (_number(margin) * _number(price))
        return cls(leverage)


Leverage.MIN = Leverage(1.0)
Leverage.MAX = Leverage(100.0)