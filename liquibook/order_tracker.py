"""State of an order while it rests in an order book."""

from __future__ import annotations

import enum


class OrderCondition(enum.IntFlag):
    """Conditions attached to an order."""

    NO_CONDITIONS = 0
    ALL_OR_NONE = 1
    IMMEDIATE_OR_CANCEL = 2
    FILL_OR_KILL = ALL_OR_NONE | IMMEDIATE_OR_CANCEL


class OrderTracker:
    """Tracks the open, reserved and iceberg quantities of an order.

    The order must provide ``order_qty()`` and ``visible_qty()``.
    """

    def __init__(self, order, conditions=OrderCondition.NO_CONDITIONS):
        self.order = order
        self._open_qty = order.order_qty()
        self._reserved = 0
        self.conditions = OrderCondition(conditions)
        self._visible_qty = order.visible_qty()
        self._hidden_qty = 0
        self._tip_remaining = order.visible_qty()

    def __repr__(self):
        return (
            f"OrderTracker(order={self.order!r}, open_qty={self.open_qty()}, "
            f"conditions={self.conditions!r})"
        )

    def reserve(self, reserved):
        """Adjust the reserved quantity and return what remains available."""
        self._reserved += reserved
        return self._open_qty - self._reserved

    def change_qty(self, delta):
        """Change the open quantity by a signed amount."""
        if delta < 0 and self._open_qty < abs(delta):
            raise RuntimeError("Replace size reduction larger than open quantity")
        self._open_qty += delta

    def fill(self, qty):
        """Record a fill of the given quantity."""
        if qty > self._open_qty:
            raise RuntimeError("Fill size larger than open quantity")
        self._open_qty -= qty
        if self.is_iceberg() and self._tip_remaining > 0:
            self._tip_remaining = max(self._tip_remaining - qty, 0)

    def filled(self):
        """Is there no open quantity left?"""
        return self._open_qty == 0

    def filled_qty(self):
        return self.order.order_qty() - self.open_qty()

    def open_qty(self):
        """Open quantity less any reserved quantity."""
        return self._open_qty - self._reserved

    def all_or_none(self):
        return bool(self.conditions & OrderCondition.ALL_OR_NONE)

    def immediate_or_cancel(self):
        return bool(self.conditions & OrderCondition.IMMEDIATE_OR_CANCEL)

    def is_iceberg(self):
        return 0 < self._visible_qty < self.order.order_qty()

    def visible_qty(self):
        return self._visible_qty

    def hidden_qty(self):
        return self._hidden_qty

    def tradeable_qty(self):
        return self._open_qty - self._reserved

    def tip_remaining(self):
        return self._tip_remaining

    def tip_consumed(self):
        """Has the visible tip of an iceberg order been used up?"""
        return self.is_iceberg() and self._tip_remaining == 0 and self._open_qty > 0

    def replenish(self):
        """Refill a consumed iceberg tip; return True if it was refilled."""
        if self.tip_consumed():
            self._tip_remaining = min(self._visible_qty, self._open_qty)
            return True
        return False