from __future__ import annotations
import logging
import time
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from storefront.domain.models.criteria import CriteriaEdit, CriteriaModel
from storefront.domain.models.product import ProductRecord
from storefront.domain.services.evaluator import evaluate
from storefront.domain.services.reconciler import reconcile

logger = logging.getLogger(__name__)

STATE_IDLE = "idle"
STATE_RECOMPUTING = "recomputing"


class ListingSession:
    """
    Recompute-on-change driver for one listing page.
    Every trigger (new snapshot, URL navigation, user edit) updates its input
    and synchronously recomputes the results before returning.
    """

    def __init__(
        self,
        snapshot: Iterable[ProductRecord] = (),
        criteria: Optional[CriteriaModel] = None,
        categories: Optional[Iterable[str]] = None,
    ):
        self.snapshot: Tuple[ProductRecord, ...] = tuple(snapshot)
        self.categories = list(categories) if categories is not None else None
        self.criteria: CriteriaModel = criteria if criteria is not None else CriteriaModel()
        self.state = STATE_IDLE
        self.results: List[ProductRecord] = []
        self.recompute()

    def load_snapshot(self, snapshot: Iterable[ProductRecord]) -> List[ProductRecord]:
        self.snapshot = tuple(snapshot)
        return self.recompute()

    def navigate(self, url_params: Mapping[str, Optional[str]]) -> List[ProductRecord]:
        self.criteria = reconcile(self.criteria, url_params, categories=self.categories)
        return self.recompute()

    def apply(self, edit: CriteriaEdit) -> List[ProductRecord]:
        self.criteria = reconcile(self.criteria, None, edit, categories=self.categories)
        return self.recompute()

    def recompute(self) -> List[ProductRecord]:
        self.state = STATE_RECOMPUTING
        t0 = time.perf_counter()
        try:
            self.results = evaluate(self.snapshot, self.criteria)
        finally:
            self.state = STATE_IDLE
        logger.debug(
            "listing recompute total=%s shown=%s time=%.4fs",
            len(self.snapshot), len(self.results), time.perf_counter() - t0,
        )
        return self.results

    def summary(self) -> Dict[str, object]:
        return {
            "count": len(self.results),
            "total": len(self.snapshot),
            "search_term": self.criteria.search_term,
            "filtered": not self.criteria.is_default_facets(),
        }


def run_listing(
    snapshot: Sequence[ProductRecord],
    previous: Optional[CriteriaModel],
    url_params: Optional[Mapping[str, Optional[str]]],
    edit: Optional[CriteriaEdit] = None,
    categories: Optional[Iterable[str]] = None,
) -> ListingSession:
    """One request worth of triggers: URL first, then the user edit."""
    t0 = time.perf_counter()
    session = ListingSession(snapshot, previous, categories=categories)
    if url_params is not None:
        session.navigate(url_params)
    if edit is not None:
        session.apply(edit)
    logger.info(
        "listing done shown=%s total=%s edit=%s time=%.3fs",
        len(session.results), len(session.snapshot),
        getattr(edit, "kind", None), time.perf_counter() - t0,
    )
    return session
