"""Validated quantity values (USD notional)."""

from __future__ import annotations

import math
import numbers
from typing import Any, ClassVar

from .errors import QuantityNotAnIntegerError, QuantityTooHighError, QuantityTooLowError
from .price import _round_half_away
from .side import SATS_PER_BTC

__all__ = ["Quantity"]

_U64_MAX = 2**64 - 1


def _number(value: Any) -> float:
    """Read a model value (or a plain number) as a float."""
    return float(getattr(value, "value", value))


def _saturating_u64(value: float) -> int:
    """Convert a float to an unsigned 64-bit integer, saturating at the ends."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U64_MAX:
        return _U64_MAX
    return int(value)


class Quantity:
    """A whole number of USD between 1 and 500,000 inclusive."""

    __slots__ = ("_value",)

    MIN: ClassVar[Quantity]
    MAX: ClassVar[Quantity]
    _LOW: ClassVar[int] = 1
    _HIGH: ClassVar[int] = 500_000

    def __init__(self, value: Any) -> None:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"expected a real number, got {type(value).__name__}")
        if isinstance(value, numbers.Integral):
            as_int = max(int(value), 0)
        else:
            as_float = float(value)
            if not (math.isfinite(as_float) and as_float.is_integer()):
                raise QuantityNotAnIntegerError(as_float)
            as_int = _saturating_u64(as_float)
        if as_int < self._LOW:
            raise QuantityTooLowError(as_int)
        if as_int > self._HIGH:
            raise QuantityTooHighError(as_int)
        object.__setattr__(self, "_value", as_int)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Quantity is immutable")

    @property
    def value(self) -> int:
        """The quantity in USD."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __float__(self) -> float:
        return float(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("Quantity", self._value))

    def _check(self, other: object) -> int:
        if not isinstance(other, Quantity):
            raise TypeError(f"cannot compare Quantity with {type(other).__name__}")
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
        return f"Quantity({self._value})"

    @classmethod
    def bounded(cls, value: Any) -> Quantity:
        """Round ``value`` to the nearest integer and clamp it into [MIN, MAX]."""
        rounded = _saturating_u64(_round_half_away(_number(value)))
        return cls(min(max(rounded, cls._LOW), cls._HIGH))

    @classmethod
    def try_calculate(cls, margin: Any, price: Any, leverage: Any) -> Quantity:
        """Quantity from margin (sats), price (USD/BTC) and leverage.

        quantity = floor(margin * leverage * price / SATS_PER_BTC)
        """
        qtd = _number(margin) * _number(leverage) * _number(price) / SATS_PER_BTC
        floored = float(math.floor(qtd)) if math.isfinite(qtd) else qtd
        return cls(_saturating_u64(floored))

    @classmethod
    def try_from_balance_perc(
        cls, balance: int, market_price: Any, balance_perc: Any
    ) -> Quantity:
        """Quantity worth ``balance_perc`` percent of ``balance`` sats at ``market_price``."""
        balance_usd = float(balance) * _number(market_price) / SATS_PER_BTC
        target = balance_usd * _number(balance_perc) / 100.0
        floored = float(math.floor(target)) if math.isfinite(target) else target
        return cls(floored)


Quantity.MIN = Quantity(1)
Quantity.MAX = Quantity(500_000)