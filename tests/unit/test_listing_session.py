from __future__ import annotations

from conftest import product
from storefront.domain.models.criteria import ClearAll, SetSortKey, SortKey, ToggleBrand
from storefront.domain.services.listing_svc import STATE_IDLE, ListingSession, run_listing


def test_session_recomputes_on_every_trigger(catalog, categories):
    session = ListingSession(catalog, categories=categories)
    assert session.state == STATE_IDLE
    assert len(session.results) == len(catalog)

    session.navigate({"category": "Electronics"})
    assert {p.product_id for p in session.results} == {"e1", "e2", "e3"}

    session.apply(ToggleBrand(value="boAt"))
    assert [p.product_id for p in session.results] == ["e3"]

    session.apply(ClearAll())
    assert len(session.results) == len(catalog)
    assert session.state == STATE_IDLE


def test_new_snapshot_reuses_current_criteria(categories):
    session = ListingSession(categories=categories)
    assert session.results == []
    session.apply(SetSortKey(value="price-high"))
    session.load_snapshot([product("a", "A", price=1), product("b", "B", price=2)])
    assert [p.product_id for p in session.results] == ["b", "a"]
    assert session.criteria.sort_key == SortKey.PRICE_DESC


def test_summary_counts(catalog, categories):
    session = run_listing(catalog, None, {"search": "cooker"}, categories=categories)
    assert session.summary() == {
        "count": 1,
        "total": len(catalog),
        "search_term": "cooker",
        "filtered": False,
    }


def test_run_listing_applies_url_before_edit(catalog, categories):
    session = run_listing(
        catalog, None, {"category": "Groceries"}, ToggleBrand(value="Tata"), categories=categories,
    )
    assert [p.product_id for p in session.results] == ["g1"]
