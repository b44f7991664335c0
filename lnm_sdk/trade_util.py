"""Trade calculations: liquidation, profit/loss and trade modifications."""

from __future__ import annotations

import math
import numbers
from typing import Optional, Tuple

from .errors import (
    AddedMarginInvalidLeverageError,
    CashInInvalidLeverageError,
    CashInInvalidMarginError,
    LeverageValidationError,
    MarginValidationError,
    NewStoplossNotAboveMarketForShortError,
    NewStoplossNotAboveTakeprofitForShortError,
    NewStoplossNotBelowMarketForLongError,
    NewStoplossNotBelowTakeprofitForLongError,
    QuantityValidationError,
    StoplossAboveEntryForLongError,
    StoplossAboveLiquidationShortError,
    StoplossBelowEntryForShortError,
    StoplossBelowLiquidationLongError,
    TakeprofitAboveEntryForShortError,
    TakeprofitBelowEntryForLongError,
    TradeParamsInvalidQuantityError,
)
from .leverage import Leverage
from .margin import Margin
from .price import PercentageCapped, Price, _round_half_away
from .quantity import Quantity, _saturating_u64
from .side import SATS_PER_BTC, TradeSide
from .trade import TradeSize

__all__ = [
    "estimate_liquidation_price",
    "evaluate_open_trade_params",
    "estimate_pl",
    "estimate_price_from_pl",
    "evaluate_new_stoploss",
    "evaluate_added_margin",
    "evaluate_cash_in",
    "evaluate_collateral_delta_for_liquidation",
    "evaluate_closing_fee",
]


def _positive_amount(amount: int) -> int:
    """Validate a strictly positive whole amount of satoshis."""
    if isinstance(amount, bool) or not isinstance(amount, numbers.Integral):
        raise TypeError(f"amount must be an integer, got {type(amount).__name__}")
    if amount <= 0:
        raise ValueError(f"amount must be positive, got {amount}")
    return int(amount)


def _reciprocal(value: float) -> float:
    """1 / value with IEEE semantics for zero."""
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def _fee(fee_perc: PercentageCapped, quantity: Quantity, price: Price) -> int:
    fee_calc = SATS_PER_BTC * fee_perc.value / 100.0
    return _saturating_u64(math.floor(fee_calc * float(quantity) / price.value))


def estimate_liquidation_price(
    side: TradeSide, quantity: Quantity, entry_price: Price, leverage: Leverage
) -> Price:
    """Estimate the liquidation price of a position.

    The margin is floored so that it is understated, giving a conservative
    liquidation price.
    """
    side = TradeSide(side)
    qty = float(quantity)
    price = entry_price.value
    lev = leverage.value

    a = 1.0 / price
    floored_margin = math.floor(qty * SATS_PER_BTC / price / lev)
    b = floored_margin / SATS_PER_BTC / qty

    if side is TradeSide.BUY:
        liquidation = 1.0 / (a + b)
    else:
        liquidation = _reciprocal(max(a - b, 0.0))

    return Price.bounded(liquidation)


def evaluate_open_trade_params(
    side: TradeSide,
    size: TradeSize,
    leverage: Leverage,
    entry_price: Price,
    stoploss: Optional[Price],
    takeprofit: Optional[Price],
    fee_perc: PercentageCapped,
) -> Tuple[Quantity, Margin, Price, int, int]:
    """Validate a new trade.

    Returns (quantity, margin, liquidation, opening_fee, closing_fee_reserved).
    """
    side = TradeSide(side)
    try:
        quantity, margin = size.to_quantity_and_margin(entry_price, leverage)
    except QuantityValidationError as exc:
        raise TradeParamsInvalidQuantityError(exc) from exc

    liquidation = estimate_liquidation_price(side, quantity, entry_price, leverage)

    if side is TradeSide.BUY:
        if stoploss is not None:
            if stoploss < liquidation:
                raise StoplossBelowLiquidationLongError(stoploss, liquidation)
            if stoploss >= entry_price:
                raise StoplossAboveEntryForLongError(stoploss, entry_price)
        if takeprofit is not None and takeprofit <= entry_price:
            raise TakeprofitBelowEntryForLongError(takeprofit, entry_price)
    else:
        if stoploss is not None:
            if stoploss > liquidation:
                raise StoplossAboveLiquidationShortError(stoploss, liquidation)
            if stoploss <= entry_price:
                raise StoplossBelowEntryForShortError(stoploss, entry_price)
        if takeprofit is not None and takeprofit >= entry_price:
            raise TakeprofitAboveEntryForShortError(takeprofit, entry_price)

    opening_fee = _fee(fee_perc, quantity, entry_price)
    closing_fee_reserved = _fee(fee_perc, quantity, liquidation)

    return quantity, margin, liquidation, opening_fee, closing_fee_reserved


def estimate_pl(
    side: TradeSide, quantity: Quantity, start_price: Price, end_price: Price
) -> float:
    """Profit or loss in satoshis of a position moving from one price to another."""
    side = TradeSide(side)
    start = start_price.value
    end = end_price.value
    if side is TradeSide.BUY:
        inverse_delta = SATS_PER_BTC / start - SATS_PER_BTC / end
    else:
        inverse_delta = SATS_PER_BTC / end - SATS_PER_BTC / start
    return float(quantity) * inverse_delta


def estimate_price_from_pl(
    side: TradeSide, quantity: Quantity, start_price: Price, pl: float
) -> Price:
    """The end price at which a position would reach ``pl`` satoshis."""
    side = TradeSide(side)
    inverse_delta = pl / float(quantity)
    inverse_start = SATS_PER_BTC / start_price.value
    if side is TradeSide.BUY:
        inverse_end = inverse_start - inverse_delta
    else:
        inverse_end = inverse_start + inverse_delta
    return Price.bounded(SATS_PER_BTC * _reciprocal(inverse_end))


def evaluate_new_stoploss(
    side: TradeSide,
    liquidation: Price,
    takeprofit: Optional[Price],
    market_price: Price,
    new_stoploss: Price,
) -> None:
    """Raise TradeValidationError if ``new_stoploss`` is not valid for the trade."""
    side = TradeSide(side)
    if side is TradeSide.BUY:
        if new_stoploss < liquidation:
            raise StoplossBelowLiquidationLongError(new_stoploss, liquidation)
        if new_stoploss >= market_price:
            raise NewStoplossNotBelowMarketForLongError(new_stoploss, market_price)
        if takeprofit is not None and new_stoploss >= takeprofit:
            raise NewStoplossNotBelowTakeprofitForLongError(new_stoploss, takeprofit)
    else:
        if new_stoploss > liquidation:
            raise StoplossAboveLiquidationShortError(new_stoploss, liquidation)
        if new_stoploss <= market_price:
            raise NewStoplossNotAboveMarketForShortError(new_stoploss, market_price)
        if takeprofit is not None and new_stoploss <= takeprofit:
            raise NewStoplossNotAboveTakeprofitForShortError(new_stoploss, takeprofit)


def evaluate_added_margin(
    side: TradeSide,
    quantity: Quantity,
    price: Price,
    current_margin: Margin,
    amount: int,
) -> Tuple[Margin, Leverage, Price]:
    """New (margin, leverage, liquidation) after adding ``amount`` sats of margin."""
    amount = _positive_amount(amount)
    new_margin = current_margin + Margin(amount)
    try:
        new_leverage = Leverage.try_calculate(quantity, new_margin, price)
    except LeverageValidationError as exc:
        raise AddedMarginInvalidLeverageError(exc) from exc
    new_liquidation = estimate_liquidation_price(side, quantity, price, new_leverage)
    return new_margin, new_leverage, new_liquidation


def evaluate_cash_in(
    side: TradeSide,
    quantity: Quantity,
    margin: Margin,
    price: Price,
    stoploss: Optional[Price],
    market_price: Price,
    amount: int,
) -> Tuple[Price, Margin, Leverage, Price, Optional[Price]]:
    """Effect of cashing in ``amount`` sats: profit first, then margin.

    Returns (price, margin, leverage, liquidation, stoploss); the stoploss is
    dropped when it no longer lies on the safe side of the liquidation.
    """
    side = TradeSide(side)
    amount = _positive_amount(amount)
    current_pl = estimate_pl(side, quantity, price, market_price)

    if current_pl > 0.0:
        pl_sats = _saturating_u64(current_pl)
        if amount < pl_sats:
            new_price = estimate_price_from_pl(side, quantity, price, float(amount))
            remaining = 0
        else:
            new_price = market_price
            remaining = amount - pl_sats
    else:
        new_price = price
        remaining = amount

    if remaining == 0:
        new_margin = margin
    else:
        try:
            new_margin = Margin(max(margin.value - remaining, 0))
        except MarginValidationError as exc:
            raise CashInInvalidMarginError(exc) from exc

    try:
        new_leverage = Leverage.try_calculate(quantity, new_margin, new_price)
    except LeverageValidationError as exc:
        raise CashInInvalidLeverageError(exc) from exc
    new_liquidation = estimate_liquidation_price(side, quantity, new_price, new_leverage)

    new_stoploss: Optional[Price] = None
    if stoploss is not None:
        if side is TradeSide.BUY:
            valid = new_liquidation <= stoploss
        else:
            valid = new_liquidation >= stoploss
        new_stoploss = stoploss if valid else None

    return new_price, new_margin, new_leverage, new_liquidation, new_stoploss


def evaluate_collateral_delta_for_liquidation(
    side: TradeSide,
    quantity: Quantity,
    margin: Margin,
    price: Price,
    liquidation: Price,
    target_liquidation: Price,
    market_price: Price,
) -> int:
    """Collateral to add (positive) or remove (negative) to reach a target liquidation."""
    if target_liquidation == liquidation:
        return 0

    target_collateral = Margin.est_from_liquidation_price(
        side, quantity, market_price, target_liquidation
    )
    pl = estimate_pl(side, quantity, price, market_price)
    return target_collateral.value - margin.value - int(_round_half_away(pl))


def evaluate_closing_fee(
    fee_perc: PercentageCapped, quantity: Quantity, close_price: Price
) -> int:
    """Trading fee in satoshis for closing a position at ``close_price``."""
    return _fee(fee_perc, quantity, close_price)