from __future__ import annotations
from enum import Enum
from typing import Annotated, FrozenSet, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from storefront.domain.services.constants import (
    SORT_NAME_ASC,
    SORT_PRICE_ASC,
    SORT_PRICE_DESC,
    SORT_RATING_DESC,
    SORT_DISCOUNT_DESC,
    SORT_POPULARITY_DESC,
)


class SortKey(str, Enum):
    NAME_ASC = SORT_NAME_ASC
    PRICE_ASC = SORT_PRICE_ASC
    PRICE_DESC = SORT_PRICE_DESC
    RATING_DESC = SORT_RATING_DESC
    DISCOUNT_DESC = SORT_DISCOUNT_DESC
    POPULARITY_DESC = SORT_POPULARITY_DESC


class PriceRange(BaseModel):
    """Inclusive price interval. max=None means no upper bound."""
    min: float = 0.0
    max: Optional[float] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_inverted(self) -> bool:
        return self.max is not None and self.min > self.max

    def contains(self, price: float) -> bool:
        if price < self.min:
            return False
        return self.max is None or price <= self.max


DEFAULT_PRICE_RANGE = PriceRange()


class CriteriaModel(BaseModel):
    """
    Complete, immutable description of one listing query.
    Every change goes through model_copy(update=...) and yields a new model.
    """
    search_term: Optional[str] = None
    categories: FrozenSet[str] = frozenset()
    brands: FrozenSet[str] = frozenset()
    price_range: PriceRange = DEFAULT_PRICE_RANGE
    min_rating: float = 0.0
    sort_key: SortKey = SortKey.NAME_ASC
    # last `category` URL parameter applied by the reconciler (not a filter)
    url_category: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def is_default_facets(self) -> bool:
        return (
            not self.categories
            and not self.brands
            and self.price_range == DEFAULT_PRICE_RANGE
            and self.min_rating == 0
        )


# ----- User edits (one field at a time) --------------------------------------

class ToggleCategory(BaseModel):
    kind: Literal["toggle_category"] = "toggle_category"
    value: str
    model_config = ConfigDict(frozen=True)


class ToggleBrand(BaseModel):
    kind: Literal["toggle_brand"] = "toggle_brand"
    value: str
    model_config = ConfigDict(frozen=True)


class SetPriceRange(BaseModel):
    kind: Literal["set_price_range"] = "set_price_range"
    min: Optional[float] = None
    max: Optional[float] = None
    model_config = ConfigDict(frozen=True)


class SetMinRating(BaseModel):
    kind: Literal["set_min_rating"] = "set_min_rating"
    value: float = 0.0
    model_config = ConfigDict(frozen=True)


class SetSortKey(BaseModel):
    # raw value, resolved (or ignored) by the reconciler
    kind: Literal["set_sort_key"] = "set_sort_key"
    value: str
    model_config = ConfigDict(frozen=True)


class ClearAll(BaseModel):
    kind: Literal["clear_all"] = "clear_all"
    model_config = ConfigDict(frozen=True)


CriteriaEdit = Annotated[
    Union[ToggleCategory, ToggleBrand, SetPriceRange, SetMinRating, SetSortKey, ClearAll],
    Field(discriminator="kind"),
]
