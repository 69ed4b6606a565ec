"""Synthetic Catalog — generation, filtering, sorting and summary of mock products.

Invariants:
    - Item ids are unique and dense (1..N) within one generated batch
    - CatalogItem is frozen; filter_sort returns a new list and never mutates its input
    - Sort is stable: price ascending, rating DESCENDING, string keys case-sensitive lexicographic
    - summary_statistics rejects an empty batch (InvalidArgumentError)
"""

import random
from collections.abc import Sequence
from dataclasses import dataclass, asdict

from memolab.core.domain_types import (
    ALL_CATEGORIES,
    DEFAULT_PRICE_RANGE,
    IN_STOCK_PROBABILITY,
    MIN_PRICE,
    PRICE_SPAN,
    Brand,
    Category,
    SortKey,
)
from memolab.core.errors import InvalidArgumentError


@dataclass(frozen=True)
class CatalogItem:
    """One mock product."""
    id: int
    name: str
    category: str
    brand: str
    price: int
    rating: float
    in_stock: bool
    description: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CatalogStatistics:
    """Summary of a non-empty catalog slice."""
    count: int
    average_price: float
    average_rating: float
    min_price: int
    max_price: int
    in_stock_count: int

    def to_dict(self) -> dict:
        return asdict(self)


_CATEGORIES = [c.value for c in Category]
_BRANDS = [b.value for b in Brand]


def generate_catalog(size: int, rng: random.Random | None = None) -> list[CatalogItem]:
    """Generate size items, every field drawn independently from rng."""
    if size < 0:
        raise InvalidArgumentError(
            f"catalog size must be non-negative, got {size}", "size",
        )
    rng = rng or random.Random()  # nosec B311
    return [_generate_item(index + 1, rng) for index in range(size)]


def _generate_item(item_id: int, rng: random.Random) -> CatalogItem:
    return CatalogItem(
        id=item_id,
        name=f"Product {item_id}",
        category=rng.choice(_CATEGORIES),
        brand=rng.choice(_BRANDS),
        price=int(rng.random() * PRICE_SPAN) + MIN_PRICE,
        rating=round(rng.random() * 4 + 1, 1),
        in_stock=rng.random() < IN_STOCK_PROBABILITY,
        description=f"This is a description for product {item_id}",
    )


def filter_sort(
    items: Sequence[CatalogItem],
    search_term: str = "",
    category: str = ALL_CATEGORIES,
    price_range: tuple[int, int] = DEFAULT_PRICE_RANGE,
    sort_key: str = SortKey.NAME.value,
) -> list[CatalogItem]:
    """Filter by search term, category and inclusive price range, then sort by sort_key.

    The default price_range stops at 1000 while generated prices reach
    MIN_PRICE + PRICE_SPAN - 1 (1009), so the default filter leaves out the
    top few items. Pass a wider range to keep every item.
    """
    try:
        key = SortKey(sort_key)
    except ValueError:
        raise InvalidArgumentError(
            f"Unknown sort key '{sort_key}'", "sort_key",
        )

    needle = search_term.lower()
    low, high = price_range
    filtered = [
        item for item in items
        if (not needle or _matches_search(item, needle))
        and (category == ALL_CATEGORIES or item.category == category)
        and low <= item.price <= high
    ]

    if key is SortKey.PRICE:
        return sorted(filtered, key=lambda item: item.price)
    if key is SortKey.RATING:
        # sorted() stays stable with reverse=True
        return sorted(filtered, key=lambda item: item.rating, reverse=True)
    return sorted(filtered, key=lambda item: getattr(item, key.value))


def _matches_search(item: CatalogItem, needle: str) -> bool:
    return (
        needle in item.name.lower()
        or needle in item.category.lower()
        or needle in item.brand.lower()
    )


def summary_statistics(items: Sequence[CatalogItem]) -> CatalogStatistics:
    """Count, mean price/rating, price bounds and in-stock count."""
    if not items:
        raise InvalidArgumentError(
            "summary statistics require at least one item", "items",
        )
    prices = [item.price for item in items]
    ratings = [item.rating for item in items]
    return CatalogStatistics(
        count=len(items),
        average_price=round(sum(prices) / len(prices), 2),
        average_rating=round(sum(ratings) / len(ratings), 1),
        min_price=min(prices),
        max_price=max(prices),
        in_stock_count=sum(1 for item in items if item.in_stock),
    )


def list_categories(items: Sequence[CatalogItem]) -> list[str]:
    """Sorted unique categories present in a batch."""
    return sorted({item.category for item in items})
