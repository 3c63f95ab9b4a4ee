"""Currency, percentage and change-colour formatting for result cards."""

from __future__ import annotations

import math
from enum import Enum

PLACEHOLDER = "—"


def _missing(value: float | None) -> bool:
    return value is None or not math.isfinite(value)


def format_currency(value: float | None) -> str:
    """Format a price as US dollars: $12.30, $1,234.50, -$3.00."""
    if _missing(value):
        return PLACEHOLDER
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_change(value: float | None) -> str:
    """Format a percentage change with an explicit sign: +5.00%, -3.20%, 0.00%."""
    if _missing(value):
        return PLACEHOLDER
    value = value + 0.0  # -0.0 prints as 0.00%
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.2f}%"


class ChangeCategory(str, Enum):
    """Direction of a price change, each with a fixed text/background style."""

    UNKNOWN = "unknown"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    FLAT = "flat"

    @property
    def text_class(self) -> str:
        return _STYLES[self][0]

    @property
    def background_class(self) -> str:
        return _STYLES[self][1]

    @property
    def css_class(self) -> str:
        return f"{self.text_class} {self.background_class}"


_STYLES = {
    ChangeCategory.UNKNOWN: ("text-gray-500", "bg-gray-100 dark:bg-gray-800"),
    ChangeCategory.POSITIVE: ("text-emerald-700", "bg-emerald-50 dark:bg-emerald-900/40"),
    ChangeCategory.NEGATIVE: ("text-rose-700", "bg-rose-50 dark:bg-rose-900/40"),
    ChangeCategory.FLAT: ("text-gray-600", "bg-gray-100 dark:bg-gray-800"),
}


def classify_change(value: float | None) -> ChangeCategory:
    if _missing(value):
        return ChangeCategory.UNKNOWN
    if value > 0:
        return ChangeCategory.POSITIVE
    if value < 0:
        return ChangeCategory.NEGATIVE
    return ChangeCategory.FLAT
