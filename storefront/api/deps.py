# storefront/api/deps.py
import logging
import time
from typing import Tuple
from fastapi import Depends, HTTPException
from storefront.core.config import Settings, get_settings
from storefront.db.mongo import get_db
from storefront.db.redis import get_redis
from storefront.domain.models.product import ProductRecord
from storefront.domain.repositories.product_repo import ProductRepo
from storefront.domain.repositories.snapshot_cache_repo import SnapshotCacheRepo

logger = logging.getLogger(__name__)


# Dependency for injecting the MongoDB database into endpoints/services
async def mongo_db():
    db = get_db()
    if db is None:
        raise HTTPException(status_code=503, detail="Catalog database unavailable")
    return db


# Dependency for injecting the Redis client (may be None)
def redis_dep():
    return get_redis()


async def catalog_snapshot(
    db = Depends(mongo_db),
    redis = Depends(redis_dep),
    settings: Settings = Depends(get_settings),
) -> Tuple[ProductRecord, ...]:
    """
    Immutable catalog snapshot for one request.
    Redis first when available; cache errors count as misses.
    """
    t0 = time.perf_counter()
    cache = SnapshotCacheRepo(redis, prefix=settings.snapshot_cache_prefix, collection=settings.products_collection) if redis else None

    if cache is not None:
        try:
            cached = await cache.get()
        except Exception as e:
            logger.warning("snapshot cache get error key=%s err=%s", cache.key, e)
            cached = None
        if cached is not None:
            logger.info("snapshot cache_hit items=%s", len(cached))
            return cached

    try:
        snapshot = await ProductRepo(db, settings.products_collection).list_snapshot()
    except Exception as e:
        logger.error("snapshot load failed: %s", e)
        raise HTTPException(status_code=503, detail="Catalog database unavailable")
    logger.info("snapshot db_ok items=%s db_time=%.3fs", len(snapshot), time.perf_counter() - t0)

    if cache is not None:
        try:
            await cache.set(snapshot, ttl=settings.snapshot_cache_ttl)
        except Exception as e:
            logger.warning("snapshot cache set error key=%s err=%s", cache.key, e)

    return snapshot
