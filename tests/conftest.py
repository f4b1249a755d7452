from __future__ import annotations

import pytest

from storefront.domain.models.product import ProductRecord


def product(pid: str, name: str, **kw) -> ProductRecord:
    kw.setdefault("price", 0)
    return ProductRecord(product_id=pid, name=name, **kw)


@pytest.fixture()
def small_snapshot():
    return (
        product("p1", "Zen Fan", category="Home", price=500),
        product("p2", "Air Cooler", category="Home", price=1500),
        product("p3", "Phone X", category="Electronics", price=9000),
    )


@pytest.fixture()
def catalog():
    return (
        product(
            "e1", "Redmi Note 13", brand="Xiaomi", category="Electronics", price=17999,
            original_price=21999, rating=4.3, reviews_count=5120,
            description="AMOLED display smartphone",
        ),
        product(
            "e2", "Galaxy M34", brand="Samsung", category="Electronics", price=15999,
            original_price=24999, discount_percentage=36, rating=4.1, reviews_count=8800,
        ),
        product(
            "e3", "Airdopes 141", brand="boAt", category="Electronics", price=1299,
            original_price=4490, rating=3.9, reviews_count=15000,
            description="wireless earbuds",
        ),
        product(
            "h1", "Pressure Cooker 5L", brand="Prestige", category="Home & Kitchen", price=2199,
            rating=4.5, reviews_count=940,
        ),
        product(
            "f1", "Cotton Kurta", brand="Fabindia", category="Fashion", price=1799,
            original_price=2199, rating=4.0, reviews_count=312,
        ),
        product("g1", "Salt 1kg", brand="Tata", category="Groceries", price=28, rating=4.6, reviews_count=2100),
        product("g2", "Loose Rice 5kg", category="Groceries", price=450, rating=3.2, reviews_count=15),
    )


@pytest.fixture()
def categories():
    return ["Electronics", "Home & Kitchen", "Fashion", "Groceries"]
