"""Listener interfaces for order and order book events."""

from __future__ import annotations

from abc import ABC, abstractmethod


class OrderListener(ABC):
    """Receives events about individual orders."""

    @abstractmethod
    def on_accept(self, order):
        """An order was accepted."""

    def on_trigger_stop(self, order):
        """A stop order was triggered. Does nothing unless overridden."""

    @abstractmethod
    def on_reject(self, order, reason):
        """An order was rejected."""

    @abstractmethod
    def on_fill(self, order, matched_order, fill_qty, fill_price):
        """An inbound order was filled against a resting order."""

    @abstractmethod
    def on_cancel(self, order):
        """An order was cancelled."""

    @abstractmethod
    def on_cancel_reject(self, order, reason):
        """A cancel request was rejected."""

    @abstractmethod
    def on_replace(self, order, size_delta, new_price):
        """An order was replaced."""

    @abstractmethod
    def on_replace_reject(self, order, reason):
        """A replace request was rejected."""


class OrderBookListener(ABC):
    """Receives notice of any change in an order book."""

    @abstractmethod
    def on_order_book_change(self, book):
        """Something in the book changed."""