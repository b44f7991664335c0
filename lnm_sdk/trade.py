"""Trade size and execution specifications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from .margin import Margin
from .price import Price
from .quantity import Quantity
from .side import TradeExecutionType

__all__ = ["TradeSize", "TradeExecution"]


@dataclass(frozen=True)
class TradeSize:
    """Size of a trade, given either as a quantity (USD) or as a margin (sats)."""

    value: Union[Quantity, Margin]

    def __post_init__(self) -> None:
        if not isinstance(self.value, (Quantity, Margin)):
            raise TypeError(
                f"trade size must be a Quantity or a Margin, got {type(self.value).__name__}"
            )

    @classmethod
    def quantity(cls, value: Any) -> TradeSize:
        """Size given as a quantity; raises QuantityValidationError if invalid."""
        return cls(value if isinstance(value, Quantity) else Quantity(value))

    @classmethod
    def margin(cls, value: Any) -> TradeSize:
        """Size given as a margin; raises MarginValidationError if invalid."""
        return cls(value if isinstance(value, Margin) else Margin(value))

    @property
    def is_quantity(self) -> bool:
        """Whether the size is given as a quantity."""
        return isinstance(self.value, Quantity)

    def to_quantity_and_margin(self, price: Price, leverage: Any) -> Tuple[Quantity, Margin]:
        """Both quantity and margin for this size at ``price`` and ``leverage``."""
        if isinstance(self.value, Margin):
            return Quantity.try_calculate(self.value, price, leverage), self.value
        return self.value, Margin.calculate(self.value, price, leverage)

    def __str__(self) -> str:
        kind = "Quantity" if self.is_quantity else "Margin"
        return f"{kind}({self.value})"


@dataclass(frozen=True)
class TradeExecution:
    """Execution at market (``price`` is None) or at a limit price."""

    price: Optional[Price] = None

    def __post_init__(self) -> None:
        if self.price is not None and not isinstance(self.price, Price):
            raise TypeError(f"limit price must be a Price, got {type(self.price).__name__}")

    @classmethod
    def market(cls) -> TradeExecution:
        """Execute immediately at market price."""
        return cls(None)

    @classmethod
    def limit(cls, price: Any) -> TradeExecution:
        """Execute at ``price`` or better."""
        return cls(price if isinstance(price, Price) else Price(price))

    def to_type(self) -> TradeExecutionType:
        """The execution type without its price."""
        return TradeExecutionType.MARKET if self.price is None else TradeExecutionType.LIMIT