# storefront/domain/repositories/product_repo.py

from __future__ import annotations
import logging
from typing import List, Optional, Tuple
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError
from storefront.domain.models.product import ProductRecord

logger = logging.getLogger(__name__)

# Fields the listing needs; anything else stays in Mongo
_SNAPSHOT_PROJECTION = {
    "_id": 0,
    "product_id": 1,
    "id": 1,
    "name": 1,
    "brand": 1,
    "category": 1,
    "price": 1,
    "original_price": 1,
    "discount_percentage": 1,
    "rating": 1,
    "reviews_count": 1,
    "description": 1,
    "image_url": 1,
}


def to_record(doc: dict) -> Optional[ProductRecord]:
    """Validate one stored document; None (and a warning) when it is unusable."""
    try:
        return ProductRecord.model_validate(doc)
    except ValidationError as e:
        pid = doc.get("product_id") or doc.get("id")
        logger.warning("skipping product doc product_id=%s errors=%s", pid, e.error_count())
        return None


class ProductRepo:
    """
    Read-only snapshot supplier backed by the 'products' collection.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "products"):
        self.col = db[collection_name]

    async def list_snapshot(self) -> Tuple[ProductRecord, ...]:
        """
        Load the whole catalog in storage order.
        Documents that fail validation are skipped, never fatal.
        """
        cursor = self.col.find({}, _SNAPSHOT_PROJECTION)
        records: List[ProductRecord] = []
        async for doc in cursor:
            rec = to_record(doc)
            if rec is not None:
                records.append(rec)
        return tuple(records)
