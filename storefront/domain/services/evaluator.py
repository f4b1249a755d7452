import logging
import time
from typing import List, Sequence

from storefront.domain.models.criteria import CriteriaModel
from storefront.domain.models.product import ProductRecord
from storefront.domain.services.predicates import compile_predicate
from storefront.domain.services.sorting import sort_products

logger = logging.getLogger(__name__)


def evaluate(snapshot: Sequence[ProductRecord], criteria: CriteriaModel) -> List[ProductRecord]:
    """
    Filter the snapshot with the compiled predicate, then stable-sort the matches.
    Returns the snapshot's own record objects; the snapshot itself is left untouched.
    An inverted price range or an all-excluding criteria set yields [].
    """
    t0 = time.perf_counter()

    if criteria.price_range.is_inverted:
        logger.debug(
            "evaluate inverted price range min=%s max=%s -> empty",
            criteria.price_range.min, criteria.price_range.max,
        )
        return []

    predicate = compile_predicate(criteria)
    matches = [p for p in snapshot if predicate(p)]
    results = sort_products(matches, criteria.sort_key)

    logger.debug(
        "evaluate snapshot=%s matches=%s sort=%s time=%.4fs",
        len(snapshot), len(results), criteria.sort_key.value, time.perf_counter() - t0,
    )
    return results
