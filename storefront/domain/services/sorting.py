import unicodedata
from functools import cmp_to_key, lru_cache
from typing import Callable, Iterable, List, Tuple

from storefront.domain.models.criteria import SortKey
from storefront.domain.models.product import ProductRecord

Comparator = Callable[[ProductRecord, ProductRecord], int]


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


@lru_cache(maxsize=4096)
def collation_key(text: str) -> Tuple[str, str, Tuple[bool, ...]]:
    """
    Multi-level name collation, independent of the process locale.
    1. letters without accents, case-folded
    2. accents (unaccented first)
    3. case (lower-case first)
    """
    decomposed = unicodedata.normalize("NFD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return (
        base.casefold(),
        unicodedata.normalize("NFD", text.casefold()),
        tuple(c.isupper() for c in base),
    )


def _by_name(a: ProductRecord, b: ProductRecord) -> int:
    return _cmp(collation_key(a.name), collation_key(b.name))


def _by_price_asc(a: ProductRecord, b: ProductRecord) -> int:
    return _cmp(a.price, b.price)


def _by_price_desc(a: ProductRecord, b: ProductRecord) -> int:
    return _cmp(b.price, a.price)


def _by_rating_desc(a: ProductRecord, b: ProductRecord) -> int:
    return _cmp(b.rating, a.rating)


def _by_discount_desc(a: ProductRecord, b: ProductRecord) -> int:
    return _cmp(b.discount, a.discount)


def _by_popularity_desc(a: ProductRecord, b: ProductRecord) -> int:
    return _cmp(b.reviews_count, a.reviews_count)


_COMPARATORS = {
    SortKey.NAME_ASC: _by_name,
    SortKey.PRICE_ASC: _by_price_asc,
    SortKey.PRICE_DESC: _by_price_desc,
    SortKey.RATING_DESC: _by_rating_desc,
    SortKey.DISCOUNT_DESC: _by_discount_desc,
    SortKey.POPULARITY_DESC: _by_popularity_desc,
}


def comparator_for(sort_key) -> Comparator:
    """
    Three-way comparator for a sort key (negative, zero or positive).
    Unknown keys fall back to name ordering.
    """
    try:
        return _COMPARATORS[SortKey(sort_key)]
    except ValueError:
        return _by_name


def sort_products(products: Iterable[ProductRecord], sort_key) -> List[ProductRecord]:
    # sorted() is stable: ties keep their input order
    return sorted(products, key=cmp_to_key(comparator_for(sort_key)))
