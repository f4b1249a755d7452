from __future__ import annotations

from conftest import product
from storefront.domain.models.criteria import CriteriaModel, PriceRange
from storefront.domain.services.predicates import compile_predicate


def test_search_matches_brand_category_and_description():
    rec = product("x", "Airdopes 141", brand="boAt", category="Electronics", description="Wireless Earbuds")
    for term in ("AIRDOPES", "boat", "electro", "earbuds"):
        assert compile_predicate(CriteriaModel(search_term=term))(rec), term
    assert not compile_predicate(CriteriaModel(search_term="kurta"))(rec)


def test_search_with_missing_optional_fields_does_not_fail():
    rec = product("x", "Loose Rice")
    assert compile_predicate(CriteriaModel(search_term="rice"))(rec)
    assert not compile_predicate(CriteriaModel(search_term="tata"))(rec)


def test_empty_search_term_is_no_restriction():
    assert compile_predicate(CriteriaModel(search_term=""))(product("x", "Anything"))


def test_record_without_brand_never_matches_brand_facet():
    pred = compile_predicate(CriteriaModel(brands=frozenset({"Tata"})))
    assert not pred(product("x", "Loose Rice"))
    assert pred(product("y", "Salt", brand="Tata"))


def test_category_facet_is_or_within_selection():
    pred = compile_predicate(CriteriaModel(categories=frozenset({"Fashion", "Groceries"})))
    assert pred(product("a", "Kurta", category="Fashion"))
    assert pred(product("b", "Salt", category="Groceries"))
    assert not pred(product("c", "Phone", category="Electronics"))
    assert not pred(product("d", "Mystery"))


def test_price_bounds_are_inclusive():
    pred = compile_predicate(CriteriaModel(price_range=PriceRange(min=100, max=200)))
    assert pred(product("a", "A", price=100))
    assert pred(product("b", "B", price=200))
    assert not pred(product("c", "C", price=99.99))
    assert not pred(product("d", "D", price=200.01))


def test_open_upper_bound():
    pred = compile_predicate(CriteriaModel(price_range=PriceRange(min=100)))
    assert pred(product("a", "A", price=10_000_000))
    assert not pred(product("b", "B", price=50))


def test_rating_floor_is_inclusive():
    pred = compile_predicate(CriteriaModel(min_rating=4))
    assert pred(product("a", "A", rating=4.0))
    assert not pred(product("b", "B", rating=3.99))
