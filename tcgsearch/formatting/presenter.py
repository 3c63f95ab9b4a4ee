"""Card view models for template rendering.

Combines variant selection, sparkline geometry and display formatting into
presentation-ready values so templates stay free of logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from tcgsearch.config import DEFAULT_TCGPLAYER_PRODUCT_URL
from tcgsearch.formatting.display import (
    PLACEHOLDER,
    ChangeCategory,
    classify_change,
    format_change,
    format_currency,
)
from tcgsearch.formatting.sparkline import Sparkline, make_sparkline
from tcgsearch.formatting.variants import select_best_variant
from tcgsearch.models import Card

STROKE_UP = "#10b981"
STROKE_DOWN = "#ef4444"


@dataclass(frozen=True)
class ChangeBadgeVM:
    """One percentage-change pill."""

    label: str
    title: str
    text: str
    category: ChangeCategory

    @property
    def css_class(self) -> str:
        return self.category.css_class


@dataclass(frozen=True)
class CardVM:
    """Presentation-ready result card."""

    id: str
    name: str
    details: str
    game: str
    price: str
    variant_label: str
    sparkline: Optional[Sparkline]
    stroke: str
    changes: tuple[ChangeBadgeVM, ...]
    product_url: Optional[str]


def _badge(label: str, title: str, value: float | None) -> ChangeBadgeVM:
    return ChangeBadgeVM(
        label=label,
        title=title,
        text=format_change(value),
        category=classify_change(value),
    )


def present_card(
    card: Card, product_url_base: str = DEFAULT_TCGPLAYER_PRODUCT_URL
) -> CardVM:
    best = select_best_variant(card.variants)
    spark = make_sparkline(best.price_history) if best is not None else None

    if best is not None:
        variant_label = f"{best.printing} • {best.language}"
        changes = (
            _badge("24h", "24 hour change", best.price_change_24hr),
            _badge("7d", "7 day change", best.price_change_7d),
            _badge("30d", "30 day change", best.price_change_30d),
        )
    else:
        variant_label = PLACEHOLDER
        changes = (
            _badge("24h", "24 hour change", None),
            _badge("7d", "7 day change", None),
            _badge("30d", "30 day change", None),
        )

    return CardVM(
        id=card.id,
        name=card.name,
        details=f"{card.set} • {card.number} • {card.rarity}",
        game=card.game,
        price=format_currency(best.price if best is not None else None),
        variant_label=variant_label,
        sparkline=spark,
        stroke=STROKE_UP if spark is None or spark.positive else STROKE_DOWN,
        changes=changes,
        product_url=(
            f"{product_url_base}/{card.tcgplayer_id}" if card.tcgplayer_id else None
        ),
    )


def present_cards(
    cards: Iterable[Card], product_url_base: str = DEFAULT_TCGPLAYER_PRODUCT_URL
) -> list[CardVM]:
    return [present_card(card, product_url_base) for card in cards]
