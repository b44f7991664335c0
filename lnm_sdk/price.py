"""Validated price and percentage values."""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import Any, ClassVar

from .errors import (
    PercentageAboveMaximumError,
    PercentageBelowMinimumError,
    PercentageCappedAboveMaximumError,
    PercentageCappedBelowMinimumError,
    PercentageNotFiniteError,
    PriceNotMultipleOfTickError,
    PriceTooHighError,
    PriceTooLowError,
)

__all__ = ["Percentage", "PercentageCapped", "Price"]


def _to_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"expected a real number, got {type(value).__name__}")
    return float(value)


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    if not math.isfinite(value):
        return value
    if value < 0:
        return -_round_half_away(-value)
    lower = math.floor(value)
    return float(lower + 1 if value - lower >= 0.5 else lower)


def _floor(value: float) -> float:
    return float(math.floor(value)) if math.isfinite(value) else value


def _ceil(value: float) -> float:
    return float(math.ceil(value)) if math.isfinite(value) else value


def _display(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


class _FloatValue:
    """Immutable, totally ordered wrapper around a validated float."""

    __slots__ = ("_value",)

    _value: float

    def _init_value(self, value: float) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> float:
        """The underlying float."""
        return self._value

    def __float__(self) -> float:
        return self._value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def _check(self, other: object) -> float:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return other._value  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        return self._value < self._check(other)

    def __le__(self, other: object) -> bool:
        return self._value <= self._check(other)

    def __gt__(self, other: object) -> bool:
        return self._value > self._check(other)

    def __ge__(self, other: object) -> bool:
        return self._value >= self._check(other)

    def __str__(self) -> str:
        return _display(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class PercentageCapped(_FloatValue):
    """A percentage between 0 and 100 inclusive, for portions of a whole."""

    __slots__ = ()

    MIN: ClassVar[PercentageCapped]
    MAX: ClassVar[PercentageCapped]
    _LOW: ClassVar[float] = 0.0
    _HIGH: ClassVar[float] = 100.0

    def __init__(self, value: Any) -> None:
        as_float = _to_float(value)
        if math.isnan(as_float) or as_float < self._LOW:
            raise PercentageCappedBelowMinimumError(as_float)
        if as_float > self._HIGH:
            raise PercentageCappedAboveMaximumError(as_float)
        self._init_value(as_float)

    @classmethod
    def bounded(cls, value: Any) -> PercentageCapped:
        """Clamp ``value`` into [MIN, MAX]."""
        return cls(min(max(_to_float(value), cls._LOW), cls._HIGH))


class Percentage(_FloatValue):
    """A percentage between 0 and 10,000 inclusive, for gains and changes."""

    __slots__ = ()

    MIN: ClassVar[Percentage]
    MAX: ClassVar[Percentage]
    _LOW: ClassVar[float] = 0.0
    _HIGH: ClassVar[float] = 10_000.0

    def __init__(self, value: Any) -> None:
        if isinstance(value, PercentageCapped):
            as_float = value.value
        else:
            as_float = _to_float(value)
        if math.isnan(as_float):
            raise PercentageNotFiniteError()
        if as_float < self._LOW:
            raise PercentageBelowMinimumError(as_float)
        if as_float > self._HIGH:
            raise PercentageAboveMaximumError(as_float)
        self._init_value(as_float)

    @classmethod
    def bounded(cls, value: Any) -> Percentage:
        """Clamp ``value`` into [MIN, MAX]."""
        return cls(min(max(_to_float(value), cls._LOW), cls._HIGH))


class Price(_FloatValue):
    """A BTC price in USD: between 1 and 100,000,000 and a multiple of 0.5."""

    __slots__ = ()

    MIN: ClassVar[Price]
    MAX: ClassVar[Price]
    TICK: ClassVar[float] = 0.5
    _LOW: ClassVar[float] = 1.0
    _HIGH: ClassVar[float] = 100_000_000.0

    def __init__(self, value: Any) -> None:
        as_float = _to_float(value)
        if as_float < self._LOW:
            raise PriceTooLowError(as_float)
        if as_float > self._HIGH:
            raise PriceTooHighError(as_float)
        ticks = as_float / self.TICK
        if math.isnan(ticks) or abs(_round_half_away(ticks) - ticks) > 1e-10:
            raise PriceNotMultipleOfTickError(as_float)
        self._init_value(as_float)

    @classmethod
    def round_down(cls, value: Any) -> Price:
        """Round down to the nearest tick, then validate."""
        return cls(_floor(_to_float(value) / cls.TICK) * cls.TICK)

    @classmethod
    def round_up(cls, value: Any) -> Price:
        """Round up to the nearest tick, then validate."""
        return cls(_ceil(_to_float(value) / cls.TICK) * cls.TICK)

    @classmethod
    def round(cls, value: Any) -> Price:
        """Round to the nearest tick, then validate."""
        return cls(_round_half_away(_to_float(value) / cls.TICK) * cls.TICK)

    @classmethod
    def bounded(cls, value: Any) -> Price:
        """Clamp ``value`` into [MIN, MAX] and round it to the nearest tick."""
        clamped = min(max(_to_float(value), cls._LOW), cls._HIGH)
        return cls(_round_half_away(clamped / cls.TICK) * cls.TICK)

    def apply_discount(self, percentage: PercentageCapped) -> Price:
        """Lower the price by ``percentage`` percent, rounded to the nearest tick."""
        target = self._value - self._value * percentage.value / 100.0
        return Price.round(target)

    def apply_gain(self, percentage: Percentage) -> Price:
        """Raise the price by ``percentage`` percent, rounded to the nearest tick."""
        target = self._value + self._value * percentage.value / 100.0
        return Price.round(target)


PercentageCapped.MIN = PercentageCapped(0.0)
PercentageCapped.MAX = PercentageCapped(100.0)
Percentage.MIN = Percentage(0.0)
Percentage.MAX = Percentage(10_000.0)
Price.MIN = Price(1.0)
Price.MAX = Price(100_000_000.0)