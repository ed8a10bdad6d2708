"""Order book building blocks: depth levels, order tracking, listener interfaces and sample orders."""

__version__ = "0.1.0"

__all__ = [
    "depth_level",
    "order_tracker",
    "listeners",
    "example_order",
    "securities",
]