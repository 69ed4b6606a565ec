"""Demo Schemas — request bodies for the memoization demo renders and navigation.

Invariants:
    - Numeric inputs are bounded here, before reaching core/ (Fibonacci upper bound
      is checked against settings in the route, since it is configurable)
    - price_min <= price_max is enforced by CatalogRender
    - NavigateRequest.path must be absolute
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from uuid import UUID

from memolab.core.domain_types import ALL_CATEGORIES, SortKey


class DemoSessionResponse(BaseModel):
    """Demo session — public-facing session data."""
    id: UUID
    catalog_size: int


class ExpensiveRender(BaseModel):
    fib_number: int = Field(25, ge=0)
    calc_number: int = Field(10, ge=0, le=1000)
    use_memo: bool = True


class ReferenceRender(BaseModel):
    user_age: int = Field(25, ge=18, le=100)
    use_memo: bool = True


class PerformanceRender(BaseModel):
    fib_number: int = Field(25, ge=0)


class CatalogRender(BaseModel):
    """Catalog filter inputs — mirrors filter_sort's parameters."""
    search_term: str = Field("", max_length=200)
    category: str = ALL_CATEGORIES
    price_min: int = Field(0, ge=0)
    price_max: int = Field(1000, ge=0)
    sort_key: SortKey = SortKey.NAME
    use_memo: bool = True
    limit: int = Field(50, ge=0, le=500)

    @field_validator("search_term")
    @classmethod
    def strip_search_term(cls, v: str) -> str:
        return v.strip()

    @model_validator(mode="after")
    def validate_price_range(self):
        if self.price_min > self.price_max:
            raise ValueError("price_min must not exceed price_max")
        return self


class MistakesRender(BaseModel):
    count: int = Field(0, ge=0)
    text: str = Field("", max_length=1000)
    mistake_id: str = "missing_dependency"


class NavigateRequest(BaseModel):
    path: str = Field(min_length=1, max_length=2048)

    @field_validator("path")
    @classmethod
    def require_absolute_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("path must start with '/'")
        return v
