"""
Merge the three criteria origins into one authoritative CriteriaModel.

Precedence, applied as ordered override steps on every recomputation trigger:
  1. previous model (defaults on initial load)
  2. URL `search`  -> search term mirrors it, facets untouched
  3. URL `category` -> seeds the category facet once per distinct URL value
  4. user edit     -> replaces exactly the field it targets

Unknown sort keys or category values are ignored, never rejected.
"""
from __future__ import annotations
import logging
import math
from typing import Iterable, Mapping, Optional

from storefront.core.config import get_settings
from storefront.domain.models.criteria import (
    DEFAULT_PRICE_RANGE,
    ClearAll,
    CriteriaEdit,
    CriteriaModel,
    PriceRange,
    SetMinRating,
    SetPriceRange,
    SetSortKey,
    SortKey,
    ToggleBrand,
    ToggleCategory,
)
from storefront.domain.services.constants import (
    MAX_RATING,
    SORT_ALIASES,
    URL_PARAM_CATEGORY,
    URL_PARAM_SEARCH,
)

logger = logging.getLogger(__name__)


def resolve_sort_key(raw) -> Optional[SortKey]:
    """Map a client sort value (current or legacy dropdown value) to a SortKey, else None."""
    if raw is None:
        return None
    if isinstance(raw, SortKey):
        return raw
    value = str(raw).strip()
    try:
        return SortKey(value)
    except ValueError:
        pass
    alias = SORT_ALIASES.get(value)
    return SortKey(alias) if alias else None


def normalize_price_range(lo: Optional[float], hi: Optional[float]) -> PriceRange:
    """
    Clamp typed bounds to the non-negative domain.
    A missing or non-finite min is 0; a missing or non-finite max is unbounded.
    Inverted pairs are kept as typed; they evaluate to an empty listing.
    """
    lo = max(0.0, lo) if lo is not None and math.isfinite(lo) else 0.0
    hi = max(0.0, hi) if hi is not None and math.isfinite(hi) else None
    return PriceRange(min=lo, max=hi)


def _toggle(values: frozenset, value: str) -> frozenset:
    return values - {value} if value in values else values | {value}


def _apply_url_params(model: CriteriaModel, url_params: Mapping[str, Optional[str]], known: frozenset) -> CriteriaModel:
    update = {}

    search = url_params.get(URL_PARAM_SEARCH) or None
    if search != model.search_term:
        update["search_term"] = search

    url_category = url_params.get(URL_PARAM_CATEGORY) or None
    if url_category != model.url_category:
        update["url_category"] = url_category
        if url_category is not None:
            if url_category not in known:
                logger.debug("reconcile ignoring unknown url category=%r", url_category)
            elif url_category not in model.categories:
                update["categories"] = frozenset({url_category})

    return model.model_copy(update=update) if update else model


def apply_edit(model: CriteriaModel, edit: CriteriaEdit, *, categories: Optional[Iterable[str]] = None) -> CriteriaModel:
    """Apply one user edit; only the targeted field changes."""
    known = frozenset(categories if categories is not None else get_settings().catalog_categories)

    if isinstance(edit, ToggleCategory):
        if edit.value not in known:
            logger.debug("reconcile ignoring unknown category=%r", edit.value)
            return model
        return model.model_copy(update={"categories": _toggle(model.categories, edit.value)})

    if isinstance(edit, ToggleBrand):
        if not edit.value:
            return model
        return model.model_copy(update={"brands": _toggle(model.brands, edit.value)})

    if isinstance(edit, SetPriceRange):
        return model.model_copy(update={"price_range": normalize_price_range(edit.min, edit.max)})

    if isinstance(edit, SetMinRating):
        floor = min(MAX_RATING, max(0.0, edit.value))
        return model.model_copy(update={"min_rating": floor})

    if isinstance(edit, SetSortKey):
        key = resolve_sort_key(edit.value)
        if key is None:
            logger.debug("reconcile ignoring unknown sort key=%r", edit.value)
            return model
        return model.model_copy(update={"sort_key": key})

    if isinstance(edit, ClearAll):
        # sort key and search term survive a facet reset
        return model.model_copy(
            update={
                "categories": frozenset(),
                "brands": frozenset(),
                "price_range": DEFAULT_PRICE_RANGE,
                "min_rating": 0.0,
            }
        )

    logger.warning("reconcile unsupported edit type=%s", type(edit).__name__)
    return model


def reconcile(
    previous: Optional[CriteriaModel],
    url_params: Optional[Mapping[str, Optional[str]]],
    edit: Optional[CriteriaEdit] = None,
    *,
    categories: Optional[Iterable[str]] = None,
) -> CriteriaModel:
    """
    Produce the criteria for one recomputation.

    previous=None means initial load. url_params=None means the URL did not
    take part in this trigger, so search term and seeding state are kept.
    Reconciling twice with the same URL params and no edit is a no-op.
    """
    known = frozenset(categories if categories is not None else get_settings().catalog_categories)

    model = previous if previous is not None else CriteriaModel()
    if url_params is not None:
        model = _apply_url_params(model, url_params, known)
    if edit is not None:
        model = apply_edit(model, edit, categories=known)
    return model
