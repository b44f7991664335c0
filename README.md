# lnm_sdk

Building blocks for trading futures on LN Markets from Python:

- validated value types for prices, percentages, leverage, quantities (USD) and margins (sats);
- trade descriptions: side, size, execution type and status;
- trade calculations: liquidation price, profit and loss, fees, and the effect of adding
  margin, cashing in or moving a stoploss;
- an asynchronous REST base client built on `httpx`, with pluggable request signing;
- small configuration objects for REST and WebSocket clients.

## Installation

```
pip install lnm_sdk
```

To run the test suite:

```
pip install "lnm_sdk[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `lnm_sdk.price` | `Price`, `Percentage`, `PercentageCapped` |
| `lnm_sdk.leverage` | `Leverage` |
| `lnm_sdk.quantity` | `Quantity` |
| `lnm_sdk.margin` | `Margin` |
| `lnm_sdk.side` | `TradeSide`, `TradeExecutionType`, `TradeStatus`, `SATS_PER_BTC` |
| `lnm_sdk.trade` | `TradeSize`, `TradeExecution` |
| `lnm_sdk.trade_util` | trade calculation functions |
| `lnm_sdk.serialization` | `serialize_float_without_decimal`, `deserialize_optional_price` |
| `lnm_sdk.errors` | validation errors for the value types and trade calculations |
| `lnm_sdk.config` | `RestClientConfig`, `WebSocketClientConfig` |
| `lnm_sdk.rest` | `LnmRestBase`, `SignatureGenerator` |
| `lnm_sdk.rest_errors` | `RestApiError` and its subclasses |

## Validated values

Every value type checks its input on construction and raises a specific error when it is out
of range. All of them are immutable, hashable and ordered among their own kind; the raw number
is available as `.value`.

```python
from lnm_sdk.price import Price, Percentage, PercentageCapped
from lnm_sdk.leverage import Leverage
from lnm_sdk.quantity import Quantity
from lnm_sdk.margin import Margin
from lnm_sdk.errors import PriceNotMultipleOfTickError

price = Price(100_000)             # USD per BTC, 1 to 100,000,000, a multiple of 0.5
leverage = Leverage(10)            # 1x to 100x
quantity = Quantity(1_000)         # whole USD, 1 to 500,000
margin = Margin(10_000)            # whole sats, at least 1
share = PercentageCapped(10)       # 0 to 100
gain = Percentage(150)             # 0 to 10,000

try:
    Price(100_000.25)
except PriceNotMultipleOfTickError as exc:
    print(exc)   # Price must be a multiple of 0.5. Value: 100000.25

Price.round_down(100_000.8)        # Price(100000.5)
Price.round_up(100_000.2)          # Price(100000.5)
Price.round(100_000.8)             # Price(100001.0)
Price.bounded(200_000_000)         # clamped to Price.MAX
price.apply_discount(PercentageCapped(10))   # Price(90000.0)
price.apply_gain(Percentage(20))             # Price(120000.0)

Leverage.bounded(150)              # Leverage.MAX
Quantity.bounded(1_234.7)          # Quantity(1235)
Margin.bounded(0)                  # Margin.MIN
Margin(10) + Margin(5)             # Margin(15)
```

Values can also be derived from one another:

```python
Quantity.try_calculate(Margin(10_000), Price(100_000), Leverage(10))   # Quantity(100)
Margin.calculate(Quantity(5), Price(95_000), Leverage(1))              # Margin(5264)
Leverage.try_calculate(Quantity(1_000), Margin(20_000), Price(100_000))
Quantity.try_from_balance_perc(10_000_000, Price(100_000), PercentageCapped(10))  # Quantity(1000)
```

`Margin.est_from_liquidation_price(side, quantity, price, liquidation)` estimates the margin
that puts a position's liquidation at a given price.

## Trades

```python
from lnm_sdk.side import TradeSide, TradeStatus
from lnm_sdk.trade import TradeSize, TradeExecution

size = TradeSize.quantity(1_000)           # or TradeSize.margin(10_000)
quantity, margin = size.to_quantity_and_margin(Price(100_000), Leverage(10))

market = TradeExecution.market()
limit = TradeExecution.limit(Price(105_000))
limit.to_type()                            # TradeExecutionType.LIMIT

TradeSide.BUY.value                        # "buy"
str(TradeStatus.RUNNING)                   # "running"
```

## Trade calculations

```python
from lnm_sdk import trade_util

liquidation = trade_util.estimate_liquidation_price(
    TradeSide.BUY, Quantity(1_000), Price(110_000), Leverage(100)
)  # Price(108911.0)

pl = trade_util.estimate_pl(TradeSide.BUY, Quantity(10), Price(50_000), Price(55_000))
end = trade_util.estimate_price_from_pl(TradeSide.BUY, Quantity(10), Price(50_000), pl)

quantity, margin, liquidation, opening_fee, closing_fee_reserved = (
    trade_util.evaluate_open_trade_params(
        TradeSide.BUY,
        TradeSize.quantity(10),
        Leverage(10),
        Price(90_000),
        Price(85_000),      # stoploss
        None,               # takeprofit
        PercentageCapped(0.1),
    )
)
```

The other functions in `lnm_sdk.trade_util` work on a running trade:

- `evaluate_added_margin` returns the new margin, leverage and liquidation after adding margin;
- `evaluate_cash_in` returns the new price, margin, leverage, liquidation and stoploss after
  taking funds out, first from the profit and then from the margin;
- `evaluate_new_stoploss` checks a new stoploss against liquidation, market price and
  takeprofit;
- `evaluate_collateral_delta_for_liquidation` returns how many sats to add (positive) or
  remove (negative) to move the liquidation to a target price;
- `evaluate_closing_fee` returns the fee in sats for closing at a given price.

Amounts added or cashed in must be positive integers. Invalid combinations raise subclasses of
`lnm_sdk.errors.TradeValidationError`; every validation error is also a `ValueError`.

## REST base client

`LnmRestBase` sends requests to a domain over HTTPS and decodes JSON replies. Authenticated
requests carry the `lnm-access-key`, `lnm-access-passphrase`, `lnm-access-timestamp` and
`lnm-access-signature` headers; the signature comes from a `SignatureGenerator` subclass you
supply. An `httpx` transport can be passed in, for example for testing.

```python
from lnm_sdk.config import RestClientConfig
from lnm_sdk.rest import LnmRestBase, SignatureGenerator


class MySigner(SignatureGenerator):
    def generate(self, timestamp, method, url, body):
        return "signature"


async def main():
    config = RestClientConfig().with_timeout(10)
    async with LnmRestBase.with_credentials(
        config, "api.example.com", "placeholder", "placeholder", MySigner(), None
    ) as client:
        data = await client.make_request_without_params("GET", "/some/path", True)
```

The client offers `make_request_with_body`, `make_request_with_query_params`,
`make_request_without_params` (GET, DELETE, POST and PUT) and `make_get_request_plain_text`.
Failures are raised as subclasses of `lnm_sdk.rest_errors.RestApiError`, for example
`ErrorResponseError` (with `.status` and `.text`) for a non-success status,
`MissingRequestCredentialsError` when an authenticated request is made without credentials, and
`UnsupportedMethodError` for other HTTP methods.

## What this package does not do

- It has no ready-made client for individual API endpoints (accounts, trades, orders, market
  data); `LnmRestBase` only sends requests to the paths you give it.
- It does not compute request signatures itself; you provide a `SignatureGenerator`.
- It has no WebSocket client. `WebSocketClientConfig` only holds a disconnect timeout.
- It has no command-line interface.