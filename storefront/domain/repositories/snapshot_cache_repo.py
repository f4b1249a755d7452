# storefront/domain/repositories/snapshot_cache_repo.py
from __future__ import annotations
from typing import Optional, Sequence, Tuple
from redis.asyncio import Redis
import json

from storefront.domain.models.product import ProductRecord

"""
Note:
    - Adapter for caching the catalog snapshot in Redis.
    - No business logic here, just cache access (get/set/invalidate).
    - MongoDB stays the source of truth; a miss simply reloads from it.
"""

class SnapshotCacheRepo:
    """
    Redis cache for the full product snapshot, stored as one JSON list
    in storage order.
    """
    def __init__(self, redis: Redis, prefix: str = "catalog", collection: str = "products"):
        self.redis = redis
        self.key = f"{prefix}:snapshot:{collection}"

    async def get(self) -> Optional[Tuple[ProductRecord, ...]]:
        """
        Return the cached snapshot, or None on a miss.
        """
        if raw := await self.redis.get(self.key):
            return tuple(ProductRecord.model_validate(doc) for doc in json.loads(raw))
        return None

    async def set(self, snapshot: Sequence[ProductRecord], ttl: int) -> None:
        payload = [p.model_dump() for p in snapshot]
        await self.redis.set(self.key, json.dumps(payload, separators=(",", ":"), ensure_ascii=False), ex=ttl)

    async def invalidate(self) -> int:
        """
        Drop the cached snapshot. Returns the number of keys deleted (0 or 1).
        """
        return await self.redis.delete(self.key)
