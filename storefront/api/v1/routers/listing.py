# storefront/api/v1/routers/listing.py
from fastapi import APIRouter, Depends, Query
from typing import List, Optional, Tuple
import logging

from storefront.api.deps import catalog_snapshot
from storefront.api.v1.schemas.listing import FacetsOut, ListingEditIn, ListingOut, SortOptionOut
from storefront.core.config import Settings, get_settings
from storefront.domain.models.criteria import CriteriaModel, SortKey
from storefront.domain.models.product import ProductRecord
from storefront.domain.services.constants import (
    MAX_RATING,
    RATING_CHOICES,
    SORT_LABELS,
    URL_PARAM_CATEGORY,
    URL_PARAM_SEARCH,
)
from storefront.domain.services.listing_svc import ListingSession, run_listing
from storefront.domain.services.reconciler import normalize_price_range, resolve_sort_key

logger = logging.getLogger(__name__)

router = APIRouter(tags=["listing"])


def _criteria_from_query(
    categories: Optional[List[str]],
    brands: Optional[List[str]],
    price_min: Optional[float],
    price_max: Optional[float],
    min_rating: Optional[float],
    sort: Optional[str],
    url_category: Optional[str],
    known_categories: List[str],
) -> CriteriaModel:
    """
    Lenient parse of facet query params into the previous criteria.
    Unknown categories and sort keys are dropped instead of failing the request.
    `url_category` is the address-bar category the client already applied,
    so resending the same URL does not reseed a deselected category.
    """
    return CriteriaModel(
        categories=frozenset(c for c in (categories or []) if c in known_categories),
        brands=frozenset(b for b in (brands or []) if b),
        price_range=normalize_price_range(price_min, price_max),
        min_rating=min(MAX_RATING, max(0.0, min_rating or 0.0)),
        sort_key=resolve_sort_key(sort) or SortKey.NAME_ASC,
        url_category=url_category or None,
    )


def _listing_out(session: ListingSession) -> ListingOut:
    return ListingOut(
        criteria=session.criteria,
        items=session.results,
        count=len(session.results),
        total=len(session.snapshot),
    )


@router.get("/products/listing", response_model=ListingOut)
async def product_listing(
    search: Optional[str] = Query(None, description="Free-text search (address-bar `search`)"),
    category: Optional[str] = Query(None, description="Category from the address bar"),
    categories: Optional[List[str]] = Query(None),
    brands: Optional[List[str]] = Query(None),
    price_min: Optional[float] = Query(None),
    price_max: Optional[float] = Query(None),
    min_rating: Optional[float] = Query(None),
    sort: Optional[str] = Query(None, description="Sort key; legacy dropdown values accepted"),
    url_category: Optional[str] = Query(
        None, description="Address-bar category already applied (criteria.url_category of the previous response)",
    ),
    snapshot: Tuple[ProductRecord, ...] = Depends(catalog_snapshot),
    settings: Settings = Depends(get_settings),
):
    """
    Filtered, sorted listing for the storefront page.
    Facet params describe the current selection; `search`/`category` are
    reconciled on top of it. `category` seeds the facet only when it differs
    from `url_category`.
    """
    logger.info(
        "Request: product_listing search=%r category=%r categories=%s brands=%s price=[%s,%s] min_rating=%s sort=%s url_category=%r",
        search, category, categories, brands, price_min, price_max, min_rating, sort, url_category,
    )
    previous = _criteria_from_query(
        categories, brands, price_min, price_max, min_rating, sort, url_category, settings.catalog_categories,
    )
    session = run_listing(
        snapshot,
        previous,
        {URL_PARAM_SEARCH: search, URL_PARAM_CATEGORY: category},
        categories=settings.catalog_categories,
    )
    return _listing_out(session)


@router.post("/products/listing/edits", response_model=ListingOut)
async def apply_listing_edit(
    body: ListingEditIn,
    snapshot: Tuple[ProductRecord, ...] = Depends(catalog_snapshot),
    settings: Settings = Depends(get_settings),
):
    """
    Reconcile the client's current criteria with the address bar and one user
    edit, then return the recomputed listing along with the new criteria.
    """
    logger.info(
        "Request: apply_listing_edit edit=%s url_params=%s",
        body.edit.kind if body.edit else None,
        body.url_params.model_dump() if body.url_params else None,
    )
    session = run_listing(
        snapshot,
        body.criteria,
        body.url_params.model_dump() if body.url_params else None,
        body.edit,
        categories=settings.catalog_categories,
    )
    return _listing_out(session)


@router.get("/products/facets", response_model=FacetsOut)
async def product_facets(settings: Settings = Depends(get_settings)):
    """Sidebar vocabularies: categories, brands, rating radios and sort options."""
    return FacetsOut(
        categories=settings.catalog_categories,
        brands=settings.catalog_brands,
        ratings=list(RATING_CHOICES),
        sort_options=[SortOptionOut(value=k, label=v) for k, v in SORT_LABELS.items()],
        price_max=settings.price_slider_max,
        price_step=settings.price_slider_step,
    )
