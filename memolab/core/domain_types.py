"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Catalog categories and brands are fixed enumerations (7 each)
    - SortKey lists every key filter_sort accepts — anything else is rejected
    - ALL_CATEGORIES is the sentinel that disables the category filter
    - DemoName values double as RenderCounter labels

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

DemoSessionId = NewType("DemoSessionId", UUID)
ItemId = NewType("ItemId", int)


# ─── Value Types ─────────────────────────────────────────────────

ElapsedMs = NewType("ElapsedMs", float)   # rounded to 3 decimals
Rating = NewType("Rating", float)         # 1.0–5.0, one decimal


# ─── Enums ───────────────────────────────────────────────────────

class Category(str, Enum):
    """Catalog item categories."""
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    BOOKS = "Books"
    HOME = "Home"
    SPORTS = "Sports"
    FOOD = "Food"
    BEAUTY = "Beauty"


class Brand(str, Enum):
    """Catalog item brands."""
    APPLE = "Apple"
    SAMSUNG = "Samsung"
    NIKE = "Nike"
    ADIDAS = "Adidas"
    AMAZON = "Amazon"
    SONY = "Sony"
    HP = "HP"


class SortKey(str, Enum):
    """Sort keys for filter_sort. price ascends, rating descends, the rest are lexicographic."""
    NAME = "name"
    PRICE = "price"
    RATING = "rating"
    CATEGORY = "category"
    BRAND = "brand"
    DESCRIPTION = "description"


class DemoName(str, Enum):
    """The memoization demos — one render per API call."""
    EXPENSIVE = "expensive_calculation"
    REFERENCE = "reference_equality"
    PERFORMANCE = "performance_comparison"
    CATALOG = "real_world_catalog"
    MISTAKES = "common_mistakes"


# ─── Constants ───────────────────────────────────────────────────

ALL_CATEGORIES = "all"
DEFAULT_PRICE_RANGE: tuple[int, int] = (0, 1000)  # narrower than generated prices (10..1009)
MIN_PRICE = 10
PRICE_SPAN = 1000
IN_STOCK_PROBABILITY = 0.8
NOISE_ITERATIONS_PER_UNIT = 100_000
