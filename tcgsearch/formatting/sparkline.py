"""Sparkline geometry for price-history series.

Produces pure geometry: an SVG path plus a trending flag. Callers choose the
stroke colour.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from tcgsearch.models import PriceHistoryPoint

DEFAULT_WIDTH = 120
DEFAULT_HEIGHT = 36


@dataclass(frozen=True)
class Sparkline:
    """Polyline geometry for a price series."""

    path: str
    points: tuple[tuple[float, float], ...]
    width: int
    height: int
    positive: bool

    @property
    def view_box(self) -> str:
        return f"0 0 {self.width} {self.height}"


def _fmt(value: float) -> str:
    return f"{round(value, 2):g}"


def _valid_prices(history: Sequence[PriceHistoryPoint]) -> list[float]:
    return [
        point.p
        for point in history
        if point.p is not None and math.isfinite(point.p)
    ]


def make_sparkline(
    history: Sequence[PriceHistoryPoint] | None,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> Sparkline | None:
    """Map a price history onto a width x height box.

    Returns None when fewer than two valid prices are available.

    x runs from 1 to width-1; y is inverted so higher prices sit nearer the
    top, and stays inside [1, height-1]. A flat series is drawn as a
    horizontal line through the vertical centre.
    """
    if not history or len(history) < 2:
        return None
    prices = _valid_prices(history)
    if len(prices) < 2:
        return None

    low = min(prices)
    high = max(prices)
    flat = high == low
    span = (high - low) or 1
    step = (width - 2) / (len(prices) - 1)

    points = []
    for i, price in enumerate(prices):
        x = 1 + i * step
        if flat:
            y = height / 2
        else:
            y = 1 + (1 - (price - low) / span) * (height - 2)
        y = min(max(y, 1), height - 1)
        points.append((x, y))

    path = "M" + " L".join(f"{_fmt(x)},{_fmt(y)}" for x, y in points)
    return Sparkline(
        path=path,
        points=tuple(points),
        width=width,
        height=height,
        positive=prices[-1] >= prices[0],
    )
