"""Reference securities and random order generation for the example feed."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .example_order import ExampleOrder

_REFERENCE_PRICES = (
    ("AAPL", 436.36), ("ADBE", 45.06), ("ADI", 43.93), ("ADP", 67.09),
    ("ADSK", 38.34), ("AKAM", 43.65), ("ALTR", 31.90), ("ALXN", 96.28),
    ("AMAT", 14.623), ("AMGN", 104.88), ("AMZN", 247.74), ("ATVI", 14.69),
    ("AVGO", 31.38), ("BBBY", 68.81), ("BIDU", 85.09), ("BIIB", 214.89),
    ("BMC", 45.325), ("BRCM", 35.60), ("CA", 26.97), ("CELG", 116.901),
    ("CERN", 95.24), ("CHKP", 46.43), ("CHRW", 58.89), ("CMCSA", 41.99),
    ("COST", 108.16), ("CSCO", 20.425), ("CTRX", 57.419), ("CTSH", 63.62),
    ("CTXS", 62.38), ("DELL", 13.33), ("DISCA", 78.18), ("DLTR", 47.91),
    ("DTV", 56.56), ("EBAY", 52.215), ("EQIX", 217.015), ("ESRX", 59.26),
    ("EXPD", 35.03), ("EXPE", 55.15), ("FAST", 48.13), ("FB", 27.52),
    ("FFIV", 74.11), ("FISV", 87.58), ("FOSL", 95.09), ("GILD", 50.06),
    ("GOLD", 78.681), ("GOOG", 817.08), ("GRMN", 33.33), ("HSIC", 89.44),
    ("INTC", 23.9673), ("INTU", 60.15), ("ISRG", 492.3358), ("KLAC", 53.83),
    ("KRFT", 50.9001), ("LBTYA", 73.99), ("LIFE", 73.59), ("LINTA", 21.44),
    ("LLTC", 36.25), ("MAT", 44.99), ("MCHP", 36.1877), ("MDLZ", 31.58),
    ("MNST", 55.75), ("MSFT", 32.75), ("MU", 9.19), ("MXIM", 30.59),
    ("MYL", 28.90), ("NTAP", 34.17), ("NUAN", 18.89), ("NVDA", 13.7761),
    ("NWSA", 31.12), ("ORCL", 33.19), ("ORLY", 107.58), ("PAYX", 36.32),
    ("PCAR", 49.52), ("PCLN", 697.62), ("PRGO", 119.00), ("QCOM", 61.925),
    ("REGN", 242.49), ("ROST", 65.20), ("SBAC", 78.76), ("SBUX", 60.07),
    ("SHLD", 49.989), ("SIAL", 77.95), ("SIRI", 3.36), ("SNDK", 51.23),
    ("SPLS", 13.07), ("SRCL", 108.15), ("STX", 36.82), ("SYMC", 24.325),
    ("TXN", 36.28), ("VIAB", 66.295), ("VMED", 49.56), ("VOD", 30.49),
    ("VRSK", 61.1728), ("VRTX", 77.255), ("WDC", 54.76), ("WFM", 89.35),
    ("WYNN", 136.33), ("XLNX", 37.59), ("XRAY", 42.26), ("YHOO", 24.32),
)


@dataclass(frozen=True)
class SecurityInfo:
    """A traded symbol and its reference price."""

    symbol: str
    ref_price: float


def create_securities():
    """Return the list of example securities with their reference prices."""
    return [SecurityInfo(symbol, price) for symbol, price in _REFERENCE_PRICES]


def random_order(securities: Sequence[SecurityInfo], rng: random.Random | None = None):
    """Pick a random security and build an order priced within 2% of its reference.

    Returns a ``(symbol, ExampleOrder)`` pair.
    """
    if not securities:
        raise ValueError("no securities to generate orders for")
    rng = rng or random.Random()
    sec = securities[rng.randrange(len(securities))]
    is_buy = rng.randrange(2) != 0
    price_base = int(sec.ref_price * 100)
    delta_range = price_base // 50
    if delta_range <= 0:
        raise ValueError(f"reference price of {sec.symbol} is too low")
    delta = rng.randrange(delta_range) - delta_range // 2
    price = (price_base + delta) / 100
    qty = (rng.randrange(10) + 1) * 100
    return sec.symbol, ExampleOrder(is_buy, price, qty)


def generate_orders(
    securities: Sequence[SecurityInfo], rng: random.Random | None = None
) -> Iterator[tuple[str, ExampleOrder]]:
    """Yield random ``(symbol, order)`` pairs without end."""
    rng = rng or random.Random()
    while True:
        yield random_order(securities, rng)