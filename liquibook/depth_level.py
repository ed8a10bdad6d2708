"""A single price level of an aggregated order book depth."""

from __future__ import annotations

QUANTITY_MAX = 2**64 - 1

INVALID_LEVEL_PRICE = 0
MARKET_ORDER_BID_SORT_PRICE = QUANTITY_MAX
MARKET_ORDER_ASK_SORT_PRICE = 0


class DepthLevel:
    """One level of the limit order book, aggregated by price."""

    __slots__ = ("_price", "_order_count", "_aggregate_qty", "_is_excess", "last_change")

    def __init__(self):
        self._price = INVALID_LEVEL_PRICE
        self._order_count = 0
        self._aggregate_qty = 0
        self._is_excess = False
        self.last_change = 0

    def __repr__(self):
        return (
            f"DepthLevel(price={self._price}, order_count={self._order_count}, "
            f"aggregate_qty={self._aggregate_qty}, last_change={self.last_change})"
        )

    def assign(self, other):
        """Copy price, count and quantity from another level.

        The change stamp is copied only when the other level holds a valid
        price; the excess flag is never copied.
        """
        self._price = other._price
        self._order_count = other._order_count
        self._aggregate_qty = other._aggregate_qty
        if other._price != INVALID_LEVEL_PRICE:
            self.last_change = other.last_change
        return self

    def price(self):
        return self._price

    def order_count(self):
        return self._order_count

    def aggregate_qty(self):
        return self._aggregate_qty

    def is_excess(self):
        """Whether this level lies beyond the tracked depth."""
        return self._is_excess

    def init(self, price, is_excess):
        """Reset the level to an empty one at the given price."""
        self._price = price
        self._order_count = 0
        self._aggregate_qty = 0
        self._is_excess = is_excess

    def add_order(self, qty):
        """Add an order with the given open quantity to the level."""
        self._order_count += 1
        self._aggregate_qty += qty

    def increase_qty(self, qty):
        self._aggregate_qty += qty

    def decrease_qty(self, qty):
        self._aggregate_qty -= qty

    def set(self, price, qty, order_count, last_change=0):
        """Overwrite every value of the level."""
        self._price = price
        self._aggregate_qty = qty
        self._order_count = order_count
        self.last_change = last_change

    def close_order(self, qty):
        """Remove a cancelled or filled order; return True if the level is now empty."""
        if self._order_count == 0:
            raise RuntimeError("DepthLevel.close_order order count too low")
        if self._order_count == 1:
            self._order_count = 0
            self._aggregate_qty = 0
            return True
        self._order_count -= 1
        if self._aggregate_qty < qty:
            raise RuntimeError("DepthLevel.close_order level quantity too low")
        self._aggregate_qty -= qty
        return False

    def changed_since(self, last_published_change):
        """Has the level changed after the given stamp?"""
        return self.last_change > last_published_change