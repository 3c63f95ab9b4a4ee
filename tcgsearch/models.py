"""TCG Search Pydantic models for upstream JustTCG payloads.

The upstream API speaks camelCase; models accept either the upstream alias or
the snake_case field name. Numeric fields are lenient: absent, null or
non-numeric values become None so a single malformed price never rejects the
whole card.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    # NaN is kept as "missing"; infinities are not prices
    if math.isinf(number):
        return None
    return number


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class PriceHistoryPoint(BaseModel):
    """A single (price, timestamp) sample."""

    model_config = ConfigDict(frozen=True)

    p: float | None = None
    t: float | None = None

    @field_validator("p", "t", mode="before")
    @classmethod
    def lenient_number(cls, v: Any) -> float | None:
        return _coerce_number(v)


class Variant(BaseModel):
    """A specific printing/condition/language instance of a card."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    condition: str = ""
    printing: str = ""
    language: str = ""
    price: float | None = None
    last_updated: float | None = Field(default=None, alias="lastUpdated")
    price_change_24hr: float | None = Field(default=None, alias="priceChange24hr")
    price_change_7d: float | None = Field(default=None, alias="priceChange7d")
    price_change_30d: float | None = Field(default=None, alias="priceChange30d")
    price_history: tuple[PriceHistoryPoint, ...] = Field(
        default=(), alias="priceHistory"
    )

    @field_validator("id", "condition", "printing", "language", mode="before")
    @classmethod
    def lenient_text(cls, v: Any) -> str:
        return _coerce_text(v)

    @field_validator(
        "price",
        "last_updated",
        "price_change_24hr",
        "price_change_7d",
        "price_change_30d",
        mode="before",
    )
    @classmethod
    def lenient_number(cls, v: Any) -> float | None:
        return _coerce_number(v)

    @field_validator("price_history", mode="before")
    @classmethod
    def drop_malformed_points(cls, v: Any) -> list[Any]:
        if not isinstance(v, (list, tuple)):
            return []
        return [point for point in v if isinstance(point, (dict, PriceHistoryPoint))]


class Card(BaseModel):
    """A card returned by the upstream search endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    name: str = ""
    game: str = ""
    set: str = ""
    number: str = ""
    rarity: str = ""
    tcgplayer_id: str = Field(default="", alias="tcgplayerId")
    variants: tuple[Variant, ...] = ()

    @field_validator(
        "id", "name", "game", "set", "number", "rarity", "tcgplayer_id", mode="before"
    )
    @classmethod
    def lenient_text(cls, v: Any) -> str:
        return _coerce_text(v)

    @field_validator("variants", mode="before")
    @classmethod
    def drop_malformed_variants(cls, v: Any) -> list[Any]:
        if not isinstance(v, (list, tuple)):
            return []
        return [variant for variant in v if isinstance(variant, (dict, Variant))]


class Game(BaseModel):
    """A game offered by the upstream API; `slug` is the search filter key."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str
    slug: str

    @field_validator("id", mode="before")
    @classmethod
    def lenient_id(cls, v: Any) -> str:
        return _coerce_text(v)
