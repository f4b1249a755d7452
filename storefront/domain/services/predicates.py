from typing import Callable, List, Optional

from storefront.domain.models.criteria import CriteriaModel
from storefront.domain.models.product import ProductRecord

Predicate = Callable[[ProductRecord], bool]


def _contains(field: Optional[str], needle: str) -> bool:
    return bool(field) and needle in field.lower()


def _search_check(term: str) -> Predicate:
    needle = term.lower()

    def check(p: ProductRecord) -> bool:
        return (
            _contains(p.name, needle)
            or _contains(p.brand, needle)
            or _contains(p.category, needle)
            or _contains(p.description, needle)
        )

    return check


def compile_predicate(criteria: CriteriaModel) -> Predicate:
    """
    Compile criteria into a single predicate over a product record.

    Active facets are ANDed, in this order: search, category, brand, price, rating.
    A facet left at its default is not added at all, so defaults are no-ops.
    Membership facets use OR within the selected set.
    """
    checks: List[Predicate] = []

    if criteria.search_term:
        checks.append(_search_check(criteria.search_term))

    if criteria.categories:
        categories = criteria.categories
        checks.append(lambda p: p.category in categories)

    if criteria.brands:
        brands = criteria.brands
        # None is never a selectable brand, so absent brands fall out here
        checks.append(lambda p: p.brand is not None and p.brand in brands)

    price_range = criteria.price_range
    if price_range.min > 0 or price_range.max is not None:
        checks.append(lambda p: price_range.contains(p.price))

    if criteria.min_rating > 0:
        floor = criteria.min_rating
        checks.append(lambda p: p.rating >= floor)

    def predicate(p: ProductRecord) -> bool:
        return all(check(p) for check in checks)

    return predicate
