"""Result formatting: variant selection, sparklines and display formatters.

Usage:
    from tcgsearch.formatting import present_cards

    cards = present_cards(await client.search_cards("Pikachu"))
"""

from tcgsearch.formatting.display import (
    PLACEHOLDER,
    ChangeCategory,
    classify_change,
    format_change,
    format_currency,
)
from tcgsearch.formatting.presenter import CardVM, ChangeBadgeVM, present_card, present_cards
from tcgsearch.formatting.sparkline import Sparkline, make_sparkline
from tcgsearch.formatting.variants import select_best_variant

__all__ = [
    "PLACEHOLDER",
    "CardVM",
    "ChangeBadgeVM",
    "ChangeCategory",
    "Sparkline",
    "classify_change",
    "format_change",
    "format_currency",
    "make_sparkline",
    "present_card",
    "present_cards",
    "select_best_variant",
]
