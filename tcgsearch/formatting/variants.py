"""Representative variant selection."""

from __future__ import annotations

import math
from typing import Iterable

from tcgsearch.models import Variant


def _sort_price(variant: Variant) -> float:
    # Missing prices sort last so any priced variant wins
    if variant.price is None or math.isnan(variant.price):
        return math.inf
    return variant.price


def select_best_variant(variants: Iterable[Variant] | None) -> Variant | None:
    """Return the cheapest variant, or None when there is nothing to choose from.

    Ties resolve to the first variant encountered.
    """
    if not variants:
        return None
    return min(variants, key=_sort_price, default=None)
