# liquibook

Building blocks for a limit order book in pure Python, with no
dependencies outside the standard library.

## What is inside

- `liquibook.depth_level.DepthLevel` – one price level of aggregated
  market depth: price, order count, aggregate quantity, an excess flag
  and a `last_change` stamp. `changed_since(stamp)` tells whether the
  level changed after a given stamp; `close_order(qty)` removes an order
  and returns `True` when the level becomes empty. The module also
  defines `INVALID_LEVEL_PRICE`, `MARKET_ORDER_BID_SORT_PRICE` and
  `MARKET_ORDER_ASK_SORT_PRICE`.
- `liquibook.order_tracker.OrderTracker` and `OrderCondition` – the
  book's view of a resting order: open, filled and reserved quantity,
  the all-or-none and immediate-or-cancel conditions (`FILL_OR_KILL` is
  both), and iceberg tips that can be replenished once consumed. The
  tracked order must provide `order_qty()` and `visible_qty()`.
- `liquibook.listeners.OrderListener` and `OrderBookListener` – abstract
  callback interfaces for order events (accept, fill, cancel, replace
  and their rejections; `on_trigger_stop` does nothing unless
  overridden) and for book changes.
- `liquibook.example_order.ExampleOrder` – a simple order whose price is
  kept as a float and reported by `price()` in integer hundredths,
  truncated. It is never an iceberg (`visible_qty()` is 0).
- `liquibook.securities` – `SecurityInfo`, a list of sample securities
  with reference prices (`create_securities`), and random orders priced
  within 2% of a reference price with quantities of 100 to 1000
  (`random_order` for one, `generate_orders` for an endless generator).

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import random

from liquibook.example_order import ExampleOrder
from liquibook.order_tracker import OrderCondition, OrderTracker
from liquibook.securities import create_securities, random_order

order = ExampleOrder(True, 12.50, 300)
order.price()          # 1250

tracker = OrderTracker(order, OrderCondition.ALL_OR_NONE)
tracker.fill(100)
tracker.open_qty()     # 200
tracker.all_or_none()  # True

securities = create_securities()
symbol, sample = random_order(securities, random.Random(7))
```

Quantities and prices are integers. Inconsistent updates, such as
filling more than the open quantity or closing an order on an empty
depth level, raise `RuntimeError`; `random_order` raises `ValueError`
when given no securities.

## What it does not do

This package holds the parts an order book is made of, not the book
itself: there is no matching engine, no order book class that accepts,
matches, cancels or replaces orders, no depth aggregation across levels,
and no market data feed, network connection or command-line program.
The listener classes only define the callbacks; nothing in the package
calls them.