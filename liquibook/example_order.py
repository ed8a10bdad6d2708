"""A simple order with a decimal price, as fed to the example exchange."""

from __future__ import annotations

PRECISION = 100


class ExampleOrder:
    """A limit order whose price is stored as a float and reported in cents."""

    precision = PRECISION

    def __init__(self, is_buy, price, qty):
        self._is_buy = bool(is_buy)
        self._price = float(price)
        self._qty = qty

    def __repr__(self):
        side = "buy" if self._is_buy else "sell"
        return f"ExampleOrder({side}, price={self._price}, qty={self._qty})"

    def is_buy(self):
        return self._is_buy

    def order_qty(self):
        return self._qty

    def price(self):
        """Price in integer units of 1/precision, truncated."""
        return int(self._price * self.precision)

    def visible_qty(self):
        """Example orders are never icebergs."""
        return 0