"""Trade side, execution type and status enumerations."""

from __future__ import annotations

from enum import Enum

SATS_PER_BTC: float = 100_000_000.0
"""Number of satoshis in one bitcoin."""


class TradeSide(str, Enum):
    """The side of a trade position; the value is its wire form."""

    BUY = "buy"
    SELL = "sell"

    def __str__(self) -> str:
        return self.value.capitalize()


class TradeExecutionType(str, Enum):
    """Whether a trade executes at market or at a limit price."""

    MARKET = "market"
    LIMIT = "limit"

    def __str__(self) -> str:
        return self.value.capitalize()


class TradeStatus(str, Enum):
    """The lifecycle status of a trade."""

    OPEN = "open"
    RUNNING = "running"
    CLOSED = "closed"

    def __str__(self) -> str:
        return self.value