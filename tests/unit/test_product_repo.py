from __future__ import annotations

import asyncio
import json

from storefront.domain.models.product import ProductRecord
from storefront.domain.repositories.product_repo import ProductRepo, to_record
from storefront.domain.repositories.snapshot_cache_repo import SnapshotCacheRepo


class _Cursor:
    def __init__(self, docs):
        self._docs = list(docs)

    def __aiter__(self):
        return self

    async def __anext__(self):
        if not self._docs:
            raise StopAsyncIteration
        return self._docs.pop(0)


class _Collection:
    def __init__(self, docs):
        self.docs = docs

    def find(self, query, projection):
        return _Cursor(self.docs)


class _FakeRedis:
    def __init__(self):
        self.store = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        self.store[key] = value

    async def delete(self, key):
        return 1 if self.store.pop(key, None) is not None else 0


DOCS = [
    {"id": "p1", "name": "Zen Fan", "category": "Home", "price": 500, "rating": 4.2, "reviews_count": 12},
    {"product_id": "p2", "name": "Broken", "price": -3},
    {"product_id": "p3", "name": "Phone X", "brand": "Acme", "price": 9000, "stock": 4},
]


def test_to_record_accepts_id_alias_and_ignores_extra_keys():
    rec = to_record(DOCS[2])
    assert rec.product_id == "p3"
    assert to_record(DOCS[0]).product_id == "p1"


def test_to_record_rejects_invalid_document():
    assert to_record(DOCS[1]) is None


def test_list_snapshot_skips_invalid_documents_and_keeps_order():
    repo = ProductRepo({"products": _Collection(DOCS)})
    snapshot = asyncio.run(repo.list_snapshot())
    assert isinstance(snapshot, tuple)
    assert [p.product_id for p in snapshot] == ["p1", "p3"]


def test_snapshot_cache_roundtrip():
    redis = _FakeRedis()
    cache = SnapshotCacheRepo(redis, prefix="t")
    snapshot = (
        ProductRecord(product_id="a", name="A", price=10, original_price=20),
        ProductRecord(product_id="b", name="B", price=5),
    )

    async def scenario():
        assert await cache.get() is None
        await cache.set(snapshot, ttl=30)
        cached = await cache.get()
        deleted = await cache.invalidate()
        return cached, deleted

    cached, deleted = asyncio.run(scenario())
    assert cached == snapshot
    assert deleted == 1
    assert cache.key == "t:snapshot:products"
    assert redis.store == {}


def test_snapshot_cache_payload_is_json_list():
    redis = _FakeRedis()
    cache = SnapshotCacheRepo(redis)
    asyncio.run(cache.set((ProductRecord(product_id="a", name="A", price=1),), ttl=5))
    payload = json.loads(redis.store[cache.key])
    assert payload[0]["product_id"] == "a"
